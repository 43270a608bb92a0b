from gambit.app import main

main()
