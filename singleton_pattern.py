import threading
from typing import Any, Dict


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    The first call constructs the instance under a lock; later calls
    return it and ignore their arguments.
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls):
        """Drop the instance (mainly for tests)"""
        with cls._lock:
            cls._instances.pop(cls, None)


class AppRegistry(metaclass=SingletonMeta):
    def __init__(self, name: str = "default"):
        self.name = name
        self._entries: Dict[str, Any] = {}

    def register(self, key: str, value: Any):
        self._entries[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def __len__(self):
        return len(self._entries)


def main():
    print("=== Singleton Demo ===\n")

    first = AppRegistry("catalogue")
    first.register("theme", "dark")

    second = AppRegistry("ignored")
    print(f"Same instance: {first is second}")
    print(f"Name: {second.name}, theme: {second.get('theme')}")

    instances = []
    threads = [threading.Thread(target=lambda: instances.append(AppRegistry())) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(f"Instances seen by 5 threads: {len({id(instance) for instance in instances})}")


if __name__ == "__main__":
    main()
