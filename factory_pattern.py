from abc import ABC, abstractmethod


class Notification(ABC):
    @abstractmethod
    def deliver(self, recipient, message):
        pass


class EmailNotification(Notification):
    def deliver(self, recipient, message):
        return f"Email to {recipient}: {message}"


class SmsNotification(Notification):
    def deliver(self, recipient, message):
        return f"SMS to {recipient}: {message[:160]}"


class PushNotification(Notification):
    def deliver(self, recipient, message):
        return f"Push to {recipient}'s devices: {message}"


class NotificationCreator(ABC):
    @abstractmethod
    def factory_method(self):
        pass

    def send(self, recipient, message):
        notification = self.factory_method()
        result = notification.deliver(recipient, message)
        return f"{type(self).__name__}: {result}"


class EmailCreator(NotificationCreator):
    def factory_method(self):
        return EmailNotification()


class SmsCreator(NotificationCreator):
    def factory_method(self):
        return SmsNotification()


class PushCreator(NotificationCreator):
    def factory_method(self):
        return PushNotification()


CREATORS = {
    "email": EmailCreator,
    "sms": SmsCreator,
    "push": PushCreator,
}


def creator_for(channel):
    try:
        return CREATORS[channel.lower()]()
    except KeyError:
        raise ValueError(f"Unknown notification channel: {channel}") from None


def client_code(creator):
    print(creator.send("alice", "Your build passed"))


def main():
    client_code(EmailCreator())
    client_code(SmsCreator())
    client_code(creator_for("push"))


if __name__ == "__main__":
    main()
