from textmask.cli import main

main()
