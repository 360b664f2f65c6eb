"""Factory classes for test data generation."""

from datetime import UTC

import factory
from factory.django import DjangoModelFactory
from faker import Faker

from notifications.constants import BROADCAST
from notifications.enums import Role, Severity
from notifications.models import Notification, NotificationReadReceipt

fake = Faker()


class NotificationFactory(DjangoModelFactory):
    """Factory for a targeted Notification from a faculty member to a student."""

    class Meta:
        model = Notification

    title = factory.LazyAttribute(lambda _: fake.sentence(nb_words=4))
    message = factory.LazyAttribute(lambda _: fake.text(max_nb_chars=200))
    severity = Severity.INFO.value
    sender_id = factory.Sequence(lambda n: f"fac-{n}")
    sender_role = Role.FACULTY.value
    sender_name = factory.LazyAttribute(lambda _: fake.name())
    recipient_role = Role.STUDENT.value
    recipient_key = factory.Sequence(lambda n: f"stu-{n}")

    class Params:
        broadcast = factory.Trait(recipient_key=BROADCAST)


class NotificationReadReceiptFactory(DjangoModelFactory):
    """Factory for a reader's receipt on a broadcast."""

    class Meta:
        model = NotificationReadReceipt

    notification = factory.SubFactory(NotificationFactory, broadcast=True)
    reader_id = factory.Sequence(lambda n: f"stu-reader-{n}")
    reader_role = Role.STUDENT.value
    read_at = factory.LazyFunction(lambda: fake.date_time_this_month(tzinfo=UTC))
