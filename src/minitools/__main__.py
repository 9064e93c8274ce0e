from minitools.cli import app

app(prog_name="minitools")
