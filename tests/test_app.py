from tasktracker.app import App


def test_run_prints_name(capsys):
    App("tracker").run()
    assert capsys.readouterr().out == "Running application: tracker\n"


def test_name_is_kept():
    app = App(name="demo")
    assert app.name == "demo"
    assert app == App("demo")