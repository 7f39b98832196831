from pubkit.cli.app import main

main()
