from conjunto.cli import main

main()
