from zimu.cli import run

run()
