from life_simulator.cli import main

main()
