from keyrush.app import main

main()
