from chessgrid.app import main

main()
