from coilcalc.cli import cli

cli(prog_name="coilcalc")
