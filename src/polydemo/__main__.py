from polydemo.infrastructure.cli.main import cli

cli(prog_name="polydemo")
