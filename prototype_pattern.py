import copy
from typing import Dict, List


class Prototype:
    def clone(self, **overrides):
        """Deep copy, then apply attribute overrides to the copy"""
        duplicate = copy.deepcopy(self)
        for name, value in overrides.items():
            if not hasattr(duplicate, name):
                raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")
            setattr(duplicate, name, value)
        return duplicate


class Document(Prototype):
    def __init__(self, title: str, author: str, sections: List[str] = None,
                 metadata: Dict[str, str] = None):
        self.title = title
        self.author = author
        self.sections = list(sections or [])
        self.metadata = dict(metadata or {})

    def __repr__(self):
        return f"Document({self.title!r}, by {self.author}, {len(self.sections)} sections)"


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, key: str, prototype: Prototype):
        self._prototypes[key] = prototype

    def unregister(self, key: str):
        del self._prototypes[key]

    def clone(self, key: str, **overrides):
        if key not in self._prototypes:
            raise KeyError(f"No prototype registered under '{key}'")
        return self._prototypes[key].clone(**overrides)


def main():
    print("=== Prototype Demo ===\n")

    registry = PrototypeRegistry()
    registry.register("report", Document(
        "Quarterly Report", "template",
        sections=["Summary", "Figures", "Outlook"],
        metadata={"confidential": "yes"},
    ))

    q1 = registry.clone("report", title="Q1 Report", author="alice")
    q2 = registry.clone("report", title="Q2 Report", author="bob")
    q2.sections.append("Appendix")

    print(q1)
    print(q2)
    print(f"Sections shared between clones: {q1.sections is q2.sections}")


if __name__ == "__main__":
    main()
