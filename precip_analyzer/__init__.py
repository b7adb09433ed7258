"""Compare daily precipitation totals across Open-Meteo weather models."""

__version__ = "0.1.0"
