import uuid
from datetime import datetime, timedelta, timezone as dt_timezone
from django.test import SimpleTestCase
from transmissions.services import LeaderRow, Leaderboards, ReportRow, aggregate

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=dt_timezone.utc)
FOX = uuid.UUID("00000000-0000-0000-0000-00000000000f")
WOLF = uuid.UUID("00000000-0000-0000-0000-00000000000a")


def row(handle_id, sentiment, age, handle="Fox", platform=None):
    return ReportRow(
        handle_id=handle_id,
        handle=handle,
        platform=platform,
        sentiment=sentiment,
        created_at=NOW - age,
    )


def values(rows):
    return {r.handle_id: r.value for r in rows}


class AggregateTests(SimpleTestCase):

    def fox_rows(self):
        return [
            row(FOX, "good", timedelta(days=2)),
            row(FOX, "good", timedelta(days=2)),
            row(FOX, "bad", timedelta(days=10)),
            row(FOX, "good", timedelta(days=10)),
            row(FOX, "good", timedelta(days=10)),
        ]

    def test_fox_example(self):
        boards = aggregate(self.fox_rows(), NOW)
        self.assertEqual(boards.nicest, [LeaderRow(FOX, "Fox", None, 80)])
        self.assertEqual(values(boards.most_reported_all_time), {FOX: 5})
        self.assertEqual(values(boards.most_7d), {FOX: 2})
        self.assertEqual(boards.most_24h, [])

    def test_nicest_requires_five_reports(self):
        rows = [row(WOLF, "good", timedelta(hours=1)) for _ in range(4)]
        boards = aggregate(rows, NOW)
        self.assertEqual(boards.nicest, [])
        self.assertEqual(values(boards.most_24h), {WOLF: 4})

    def test_nicest_floor_is_configurable(self):
        rows = [row(WOLF, "good", timedelta(hours=1)) for _ in range(4)]
        boards = aggregate(rows, NOW, min_reports_for_nicest=4)
        self.assertEqual(values(boards.nicest), {WOLF: 100})

    def test_empty_input_yields_empty_lists(self):
        self.assertEqual(aggregate([], NOW), Leaderboards())

    def test_window_boundaries_are_inclusive(self):
        rows = [
            row(FOX, "bad", timedelta(hours=24)),
            row(WOLF, "bad", timedelta(days=7), handle="Wolf"),
        ]
        boards = aggregate(rows, NOW)
        self.assertEqual(values(boards.most_24h), {FOX: 1})
        self.assertEqual(values(boards.most_7d), {FOX: 1, WOLF: 1})

    def test_counts_sorted_descending_with_ties_by_handle_id(self):
        rows = [
            row(FOX, "bad", timedelta(days=1)),
            row(WOLF, "bad", timedelta(days=1), handle="Wolf"),
            row(FOX, "bad", timedelta(days=40)),
            row(WOLF, "bad", timedelta(days=40), handle="Wolf"),
        ]
        boards = aggregate(rows, NOW)
        # equal counts: WOLF's id sorts before FOX's
        self.assertEqual([r.handle for r in boards.most_reported_all_time], ["Wolf", "Fox"])
        rows.append(row(FOX, "bad", timedelta(days=50)))
        boards = aggregate(rows, NOW)
        self.assertEqual([r.handle for r in boards.most_reported_all_time], ["Fox", "Wolf"])

    def test_groups_by_handle_id_not_spelling(self):
        rows = [
            row(FOX, "bad", timedelta(days=1), handle="Fox", platform="PC"),
            row(FOX, "bad", timedelta(days=1), handle="fox", platform="PS5"),
        ]
        boards = aggregate(rows, NOW)
        self.assertEqual(boards.most_reported_all_time, [LeaderRow(FOX, "Fox", "PC", 2)])

    def test_percentage_rounds_half_up(self):
        # 1 good of 8 is 12.5%
        rows = [row(FOX, "good", timedelta(days=1))]
        rows += [row(FOX, "rat", timedelta(days=1)) for _ in range(7)]
        self.assertEqual(values(aggregate(rows, NOW).nicest), {FOX: 13})

    def test_zero_good_is_listed_at_zero_percent(self):
        rows = [row(FOX, "neutral", timedelta(days=1)) for _ in range(5)]
        self.assertEqual(values(aggregate(rows, NOW).nicest), {FOX: 0})

    def test_top_truncates_each_list(self):
        rows = [row(uuid.uuid4(), "good", timedelta(hours=1), handle=f"h{i}") for i in range(8)]
        boards = aggregate(rows, NOW).top(5)
        self.assertEqual(len(boards.most_reported_all_time), 5)
        self.assertEqual(len(boards.most_24h), 5)
