from surisign.cli import cli

cli()
