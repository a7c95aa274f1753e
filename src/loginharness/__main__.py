from loginharness.cli import main

main()
