from typing import Dict, List, Optional, Tuple


class ChatRoom:
    """Mediator: participants never reference each other directly"""

    def __init__(self, name: str):
        self.name = name
        self._participants: Dict[str, "Participant"] = {}

    def join(self, participant: "Participant"):
        if participant.name in self._participants:
            raise ValueError(f"'{participant.name}' is already in {self.name}")
        self._participants[participant.name] = participant
        participant.room = self

    def leave(self, participant: "Participant"):
        self._participants.pop(participant.name, None)
        participant.room = None

    def members(self) -> List[str]:
        return list(self._participants)

    def route(self, sender: "Participant", message: str, to: Optional[str] = None) -> int:
        """Deliver a message and return how many participants received it"""
        if to is not None:
            if to not in self._participants:
                raise ValueError(f"No participant named '{to}' in {self.name}")
            self._participants[to].receive(sender.name, message)
            return 1

        delivered = 0
        for name, participant in self._participants.items():
            if name != sender.name:
                participant.receive(sender.name, message)
                delivered += 1
        return delivered


class Participant:
    def __init__(self, name: str):
        self.name = name
        self.room: Optional[ChatRoom] = None
        self.inbox: List[Tuple[str, str]] = []

    def send(self, message: str, to: Optional[str] = None) -> int:
        if self.room is None:
            raise ValueError(f"'{self.name}' has not joined a room")
        return self.room.route(self, message, to)

    def receive(self, sender: str, message: str):
        self.inbox.append((sender, message))


def main():
    print("=== Mediator Demo ===\n")

    room = ChatRoom("design-patterns")
    alice, bob, carol = Participant("alice"), Participant("bob"), Participant("carol")
    for person in (alice, bob, carol):
        room.join(person)

    alice.send("Hi everyone!")
    bob.send("Hi alice", to="alice")
    carol.send("Who is reviewing the visitor example?")

    for person in (alice, bob, carol):
        print(f"{person.name} inbox:")
        for sender, message in person.inbox:
            print(f"  {sender}: {message}")


if __name__ == "__main__":
    main()
