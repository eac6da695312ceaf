from translations_import.cli import main

main()
