from typing import List


class Amplifier:
    def on(self):
        return "Amplifier on"

    def set_volume(self, level):
        return f"Amplifier volume set to {level}"

    def off(self):
        return "Amplifier off"


class Projector:
    def on(self):
        return "Projector on"

    def wide_screen_mode(self):
        return "Projector in widescreen mode"

    def off(self):
        return "Projector off"


class StreamingPlayer:
    def __init__(self):
        self.now_playing = None

    def on(self):
        return "Streaming player on"

    def play(self, title):
        self.now_playing = title
        return f"Playing '{title}'"

    def stop(self):
        title, self.now_playing = self.now_playing, None
        return f"Stopped '{title}'"

    def off(self):
        return "Streaming player off"


class Lights:
    def dim(self, level):
        return f"Lights dimmed to {level}%"

    def on(self):
        return "Lights on"


class HomeTheaterFacade:
    """One call per use case instead of a dozen subsystem calls"""

    def __init__(self, amplifier=None, projector=None, player=None, lights=None):
        self.amplifier = amplifier or Amplifier()
        self.projector = projector or Projector()
        self.player = player or StreamingPlayer()
        self.lights = lights or Lights()

    def watch_movie(self, title: str) -> List[str]:
        return [
            self.lights.dim(10),
            self.projector.on(),
            self.projector.wide_screen_mode(),
            self.amplifier.on(),
            self.amplifier.set_volume(5),
            self.player.on(),
            self.player.play(title),
        ]

    def end_movie(self) -> List[str]:
        if self.player.now_playing is None:
            return []
        return [
            self.player.stop(),
            self.player.off(),
            self.amplifier.off(),
            self.projector.off(),
            self.lights.on(),
        ]


def main():
    print("=== Facade Demo ===\n")
    theater = HomeTheaterFacade()
    for step in theater.watch_movie("Design Patterns: The Movie"):
        print(step)
    print()
    for step in theater.end_movie():
        print(step)


if __name__ == "__main__":
    main()
