from abphelper.cli import main

main()
