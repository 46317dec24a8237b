from deskcalc.cli import main

main()
