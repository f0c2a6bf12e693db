from node_discover.cli import cli

cli()
