from flowlisp.interpreter import main

main()
