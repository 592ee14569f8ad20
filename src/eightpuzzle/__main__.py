from eightpuzzle.play import main

main()
