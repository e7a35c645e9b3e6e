from pterobanner.cli import main

main()
