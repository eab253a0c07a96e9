from abc import ABC, abstractmethod
from typing import List, Optional

import structlog


logger = structlog.get_logger(__name__)


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float):
        pass


class WeatherStation:
    """Subject: pushes every new reading to its observers"""

    def __init__(self):
        self._observers: List[Observer] = []
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def attach(self, observer: Observer):
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer):
        if observer not in self._observers:
            raise ValueError(f"{observer!r} is not attached")
        self._observers.remove(observer)

    def set_measurements(self, temperature: float, humidity: float):
        self.temperature = temperature
        self.humidity = humidity
        self.notify()

    def notify(self):
        logger.debug("notify_observers", count=len(self._observers))
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity)


class CurrentConditionsDisplay(Observer):
    def __init__(self):
        self.last_report = None

    def update(self, temperature, humidity):
        self.last_report = f"Current conditions: {temperature}C and {humidity}% humidity"
        print(self.last_report)


class StatisticsDisplay(Observer):
    def __init__(self):
        self._readings: List[float] = []

    def update(self, temperature, humidity):
        self._readings.append(temperature)
        print(f"Avg/Max/Min temperature = {self.average:.1f}/{self.maximum}/{self.minimum}")

    @property
    def average(self) -> float:
        if not self._readings:
            return 0.0
        return sum(self._readings) / len(self._readings)

    @property
    def maximum(self) -> float:
        return max(self._readings)

    @property
    def minimum(self) -> float:
        return min(self._readings)

    @property
    def count(self) -> int:
        return len(self._readings)


def main():
    print("=== Observer Demo ===\n")

    station = WeatherStation()
    current = CurrentConditionsDisplay()
    stats = StatisticsDisplay()
    station.attach(current)
    station.attach(stats)

    station.set_measurements(26.0, 65)
    station.set_measurements(28.5, 70)

    print("\n--- Detaching statistics display ---")
    station.detach(stats)
    station.set_measurements(22.0, 90)


if __name__ == "__main__":
    main()
