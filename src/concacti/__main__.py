from concacti.cli import main

main()
