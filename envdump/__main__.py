from envdump.cli import main

main()
