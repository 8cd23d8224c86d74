from clickchess.app import main

main()
