from unittest.mock import patch
from django.db import OperationalError
from django.test import TestCase
from transmissions.db_accessor import DB_Accessor
from transmissions.exceptions import ConflictError, StoreError
from transmissions.models import Handle


class DBAccessorTests(TestCase):

    def setUp(self):
        self.obj1 = Handle.objects.create(display="Zulu", canonical_key="zulu")
        self.obj2 = Handle.objects.create(display="Alpha", canonical_key="alpha")
        self.repo = DB_Accessor(Handle)

    # ---------- list() ----------

    def test_list_default_returns_all_rows(self):
        self.assertEqual(len(self.repo.list()), 2)

    def test_list_filters(self):
        rows = self.repo.list(filters={"display": "Zulu"})
        self.assertEqual([r.pk for r in rows], [self.obj1.pk])

    def test_list_order_by(self):
        rows = self.repo.list(order_by=["-display"])
        self.assertEqual([r.display for r in rows], ["Zulu", "Alpha"])

    def test_list_limit_and_offset(self):
        self.assertEqual(len(self.repo.list(limit=1)), 1)
        rows = self.repo.list(order_by=["display"], limit=1, offset=1)
        self.assertEqual([r.display for r in rows], ["Zulu"])

    def test_list_offset_no_limit(self):
        self.assertEqual(len(self.repo.list(offset=1)), 1)

    def test_list_as_dict(self):
        result = self.repo.list(as_dict=True)
        self.assertIsInstance(result[0], dict)
        self.assertIn("canonical_key", result[0])

    # ---------- get/create/update/delete ----------

    def test_get(self):
        self.assertEqual(self.repo.get(canonical_key="alpha"), self.obj2)

    def test_create(self):
        obj = self.repo.create(display="Bravo", canonical_key="bravo")
        self.assertEqual(Handle.objects.get(pk=obj.pk).display, "Bravo")

    def test_create_duplicate_raises_conflict_and_leaves_transaction_usable(self):
        with self.assertRaises(ConflictError):
            self.repo.create(display="ALPHA", canonical_key="alpha")
        self.assertEqual(Handle.objects.count(), 2)

    def test_update(self):
        count = self.repo.update({"pk": self.obj1.pk}, platform="PC")
        self.assertEqual(count, 1)
        self.obj1.refresh_from_db()
        self.assertEqual(self.obj1.platform, "PC")

    def test_delete(self):
        self.assertEqual(self.repo.delete(pk=self.obj1.pk), 1)
        self.assertFalse(Handle.objects.filter(pk=self.obj1.pk).exists())

    def test_database_error_becomes_store_error(self):
        with patch.object(Handle.objects, "get", side_effect=OperationalError("down")):
            with self.assertRaises(StoreError) as ctx:
                self.repo.get(pk=self.obj1.pk)
        self.assertEqual(ctx.exception.message, "down")
