from svs.cli.main import main

main()
