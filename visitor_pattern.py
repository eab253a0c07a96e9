import json
import math
from abc import ABC, abstractmethod


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor):
        pass


class Circle(Shape):
    def __init__(self, radius):
        self.radius = radius

    def accept(self, visitor):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width, height):
        self.width = width
        self.height = height

    def accept(self, visitor):
        return visitor.visit_rectangle(self)


class Triangle(Shape):
    def __init__(self, a, b, c):
        if a + b <= c or a + c <= b or b + c <= a:
            raise ValueError(f"Sides {a}, {b}, {c} do not form a triangle")
        self.a, self.b, self.c = a, b, c

    def accept(self, visitor):
        return visitor.visit_triangle(self)


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle):
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle):
        pass

    @abstractmethod
    def visit_triangle(self, triangle):
        pass


class AreaVisitor(ShapeVisitor):
    def visit_circle(self, circle):
        return math.pi * circle.radius ** 2

    def visit_rectangle(self, rectangle):
        return rectangle.width * rectangle.height

    def visit_triangle(self, triangle):
        # Heron's formula
        s = (triangle.a + triangle.b + triangle.c) / 2
        return math.sqrt(s * (s - triangle.a) * (s - triangle.b) * (s - triangle.c))


class PerimeterVisitor(ShapeVisitor):
    def visit_circle(self, circle):
        return 2 * math.pi * circle.radius

    def visit_rectangle(self, rectangle):
        return 2 * (rectangle.width + rectangle.height)

    def visit_triangle(self, triangle):
        return triangle.a + triangle.b + triangle.c


class JsonExportVisitor(ShapeVisitor):
    def visit_circle(self, circle):
        return json.dumps({"type": "circle", "radius": circle.radius})

    def visit_rectangle(self, rectangle):
        return json.dumps({"type": "rectangle", "width": rectangle.width, "height": rectangle.height})

    def visit_triangle(self, triangle):
        return json.dumps({"type": "triangle", "sides": [triangle.a, triangle.b, triangle.c]})


class Drawing:
    """Object structure: applies a visitor to every shape it holds"""

    def __init__(self, shapes=None):
        self.shapes = list(shapes or [])

    def add(self, shape):
        self.shapes.append(shape)

    def apply(self, visitor):
        return [shape.accept(visitor) for shape in self.shapes]


def main():
    print("=== Visitor Demo ===\n")

    drawing = Drawing([Circle(1), Rectangle(3, 4), Triangle(3, 4, 5)])

    for visitor in (AreaVisitor(), PerimeterVisitor()):
        values = ", ".join(f"{value:.2f}" for value in drawing.apply(visitor))
        print(f"{type(visitor).__name__}: {values}")

    print("JSON export:")
    for line in drawing.apply(JsonExportVisitor()):
        print(f"  {line}")


if __name__ == "__main__":
    main()
