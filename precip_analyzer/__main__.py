from precip_analyzer.cli import main

main()
