from skillsmcp.cli import main

main()
