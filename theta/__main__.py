from theta.interpreter import main

main()
