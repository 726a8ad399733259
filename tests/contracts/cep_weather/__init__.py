"""CEP weather data contract"""
from .data_contract import CepWeatherTestDataFactory

__all__ = ["CepWeatherTestDataFactory"]
