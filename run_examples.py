"""Build precip-analyzer and run the example queries."""

from precip_analyzer.examples import main


if __name__ == "__main__":
    main()
