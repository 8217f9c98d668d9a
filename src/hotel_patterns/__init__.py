"""
Демонстрация паттернов на примере бронирования номеров в отеле:
фабричный метод, адаптер и конечный автомат состояний.
"""

__version__ = "0.1.0"
