from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest import mock

from newsletter.adapters import kafka_source


def make_message(value: bytes, *, offset: int) -> SimpleNamespace:
    return SimpleNamespace(topic="newsletter.users", partition=0, offset=offset, value=value)


def fake_kafka(*, consumer: object = None, producer: object = None) -> SimpleNamespace:
    return SimpleNamespace(
        KafkaConsumer=mock.Mock(return_value=consumer),
        KafkaProducer=mock.Mock(return_value=producer),
    )


class KafkaUserSourceTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(
            "os.environ", {"KAFKA_BOOTSTRAP_SERVERS": "localhost:9092"}, clear=True
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_get_users_drains_topic_until_empty_poll(self) -> None:
        consumer = mock.Mock()
        consumer.assignment.return_value = {"tp0"}
        consumer.poll.side_effect = [
            {
                "tp0": [
                    make_message(b'{"name":"Ivan","email":"ivan@test.com"}', offset=0),
                    make_message(b"not json", offset=1),
                    make_message(b'{"name":"Peter"}', offset=2),
                ]
            },
            {},
        ]
        kafka = fake_kafka(consumer=consumer)

        with mock.patch.object(kafka_source, "_kafka_module", return_value=kafka):
            with self.assertLogs("newsletter.adapters.kafka_source", level="WARNING"):
                users = kafka_source.KafkaUserSource().get_users()

        self.assertEqual(users, [{"name": "Ivan", "email": "ivan@test.com"}, {"name": "Peter"}])
        self.assertEqual(kafka.KafkaConsumer.call_args.args, ("newsletter.users",))
        self.assertEqual(
            kafka.KafkaConsumer.call_args.kwargs["bootstrap_servers"], ["localhost:9092"]
        )
        consumer.commit.assert_called_once_with()
        consumer.close.assert_called_once_with()

    def test_empty_polls_before_assignment_keep_polling(self) -> None:
        consumer = mock.Mock()
        consumer.assignment.side_effect = [set(), {"tp0"}]
        consumer.poll.side_effect = [
            {},
            {"tp0": [make_message(b'{"name":"Ivan"}', offset=0)]},
            {},
        ]

        with mock.patch.object(
            kafka_source, "_kafka_module", return_value=fake_kafka(consumer=consumer)
        ):
            users = kafka_source.KafkaUserSource().get_users()

        self.assertEqual(users, [{"name": "Ivan"}])
        self.assertEqual(consumer.poll.call_count, 3)

    def test_no_assignment_within_timeout_raises(self) -> None:
        consumer = mock.Mock()
        consumer.assignment.return_value = set()
        consumer.poll.return_value = {}

        with mock.patch.dict("os.environ", {"KAFKA_ASSIGNMENT_TIMEOUT_SECONDS": "0"}):
            with mock.patch.object(
                kafka_source, "_kafka_module", return_value=fake_kafka(consumer=consumer)
            ):
                with self.assertRaises(RuntimeError):
                    kafka_source.KafkaUserSource().get_users()

        consumer.commit.assert_not_called()
        consumer.close.assert_called_once_with()

    def test_get_users_without_commit_closes_consumer(self) -> None:
        consumer = mock.Mock()
        consumer.assignment.return_value = {"tp0"}
        consumer.poll.return_value = {}
        kafka = fake_kafka(consumer=consumer)

        with mock.patch.object(kafka_source, "_kafka_module", return_value=kafka):
            users = kafka_source.KafkaUserSource(topic="custom.users", commit=False).get_users()

        self.assertEqual(users, [])
        self.assertEqual(kafka.KafkaConsumer.call_args.args, ("custom.users",))
        consumer.commit.assert_not_called()
        consumer.close.assert_called_once_with()

    def test_publish_user_record_returns_metadata(self) -> None:
        producer = mock.Mock()
        producer.send.return_value.get.return_value = SimpleNamespace(
            topic="newsletter.users", partition=0, offset=7
        )

        with mock.patch.object(
            kafka_source, "_kafka_module", return_value=fake_kafka(producer=producer)
        ):
            metadata = kafka_source.publish_user_record({"name": "Ivan"})

        self.assertEqual(metadata, {"topic": "newsletter.users", "partition": 0, "offset": 7})
        producer.send.assert_called_once_with("newsletter.users", value={"name": "Ivan"})
        producer.close.assert_called_once_with()


class KafkaSettingsTests(unittest.TestCase):
    def test_bootstrap_servers_parsed_from_csv(self) -> None:
        env = {"KAFKA_BOOTSTRAP_SERVERS": "localhost:9092, kafka:29092 "}
        with mock.patch.dict("os.environ", env, clear=True):
            settings = kafka_source.KafkaSettings.from_env()
        self.assertEqual(settings.bootstrap_servers, ["localhost:9092", "kafka:29092"])

    def test_bootstrap_servers_required(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(RuntimeError):
                kafka_source.KafkaSettings.from_env()

    def test_poll_timeout_must_be_positive(self) -> None:
        env = {"KAFKA_BOOTSTRAP_SERVERS": "localhost:9092", "KAFKA_POLL_TIMEOUT_SECONDS": "0"}
        with mock.patch.dict("os.environ", env, clear=True):
            with self.assertRaises(RuntimeError):
                kafka_source.KafkaSettings.from_env()

    def test_topic_defaults_and_overrides(self) -> None:
        env = {"KAFKA_BOOTSTRAP_SERVERS": "localhost:9092"}
        with mock.patch.dict("os.environ", env, clear=True):
            self.assertEqual(kafka_source.KafkaSettings.from_env().topic, "newsletter.users")
            self.assertEqual(
                kafka_source.KafkaSettings.from_env(topic="explicit").topic, "explicit"
            )
        env["NEWSLETTER_USERS_TOPIC"] = "users.v2"
        with mock.patch.dict("os.environ", env, clear=True):
            self.assertEqual(kafka_source.KafkaSettings.from_env().topic, "users.v2")


if __name__ == "__main__":
    unittest.main()
