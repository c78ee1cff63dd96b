from matrixrain.app import main

main()
