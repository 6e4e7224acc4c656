from gitcc.cli.main import run

run()
