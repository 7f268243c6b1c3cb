from thor.cli import main

main()
