from stressgen.cli.main import app

app(prog_name="stressgen")
