from chessdex.cli import main

main()
