from abc import ABC, abstractmethod


class Chair(ABC):
    @abstractmethod
    def sit_on(self):
        pass


class Sofa(ABC):
    @abstractmethod
    def lie_on(self):
        pass

    def matches(self, chair: Chair):
        return self.style == chair.style


class ModernChair(Chair):
    style = "modern"

    def sit_on(self):
        return "Sitting on a sleek modern chair"


class VictorianChair(Chair):
    style = "victorian"

    def sit_on(self):
        return "Sitting on an ornate victorian chair"


class ModernSofa(Sofa):
    style = "modern"

    def lie_on(self):
        return "Lying on a low modern sofa"


class VictorianSofa(Sofa):
    style = "victorian"

    def lie_on(self):
        return "Lying on a tufted victorian sofa"


class FurnitureFactory(ABC):
    @abstractmethod
    def create_chair(self) -> Chair:
        pass

    @abstractmethod
    def create_sofa(self) -> Sofa:
        pass


class ModernFurnitureFactory(FurnitureFactory):
    def create_chair(self):
        return ModernChair()

    def create_sofa(self):
        return ModernSofa()


class VictorianFurnitureFactory(FurnitureFactory):
    def create_chair(self):
        return VictorianChair()

    def create_sofa(self):
        return VictorianSofa()


def furnish_room(factory: FurnitureFactory):
    """Client code only sees the abstract factory, so the set always matches"""
    chair = factory.create_chair()
    sofa = factory.create_sofa()
    return [chair.sit_on(), sofa.lie_on(), f"Matching set: {sofa.matches(chair)}"]


def main():
    print("=== Abstract Factory Demo ===\n")
    for factory in (ModernFurnitureFactory(), VictorianFurnitureFactory()):
        print(f"--- {type(factory).__name__} ---")
        for line in furnish_room(factory):
            print(line)


if __name__ == "__main__":
    main()
