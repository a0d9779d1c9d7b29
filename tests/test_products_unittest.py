import os
import shutil
import tempfile
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import INVENTORY_FILE, SAMPLE_PRODUCTS
from errors import FileError, InputError, SelectionError
from products import InventoryStore
from storage import InventoryFile


class InventoryStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmpdir, INVENTORY_FILE)
        self.store = InventoryStore(InventoryFile(self.path))

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _file_lines(self):
        with open(self.path, encoding='utf-8') as fh:
            return fh.read().splitlines()

    def test_missing_file_loads_sample_data_without_writing(self):
        self.store.load()
        self.assertEqual(self.store.rows(), list(SAMPLE_PRODUCTS))
        self.assertFalse(os.path.exists(self.path))

    def test_empty_file_loads_empty_inventory(self):
        open(self.path, 'w').close()
        self.store.load()
        self.assertEqual(self.store.rows(), [])

    def test_add_persists_and_round_trips(self):
        self.store.add('Widget', '5', '10')
        self.store.add('Gizmo', 0.1, 0)
        self.assertEqual(self._file_lines(), ['Widget,5.0,10', 'Gizmo,0.1,0'])

        reloaded = InventoryStore(InventoryFile(self.path))
        reloaded.load()
        self.assertEqual(reloaded.rows(), [('Widget', 5.0, 10), ('Gizmo', 0.1, 0)])

    def test_add_rejects_bad_input_without_mutation(self):
        for price, stock in (('x', '1'), ('1', 'y'), ('-1', '1'), ('1', '-1'), ('1', '2.5')):
            with self.assertRaises(InputError):
                self.store.add('Widget', price, stock)
        self.assertEqual(self.store.rows(), [])
        self.assertFalse(os.path.exists(self.path))

    def test_ids_are_unique_per_product(self):
        a = self.store.add('Same', 1, 1)
        b = self.store.add('Same', 2, 2)
        self.assertNotEqual(a.product_id, b.product_id)
        self.assertIs(self.store.find_by_id(b.product_id), b)
        self.assertIs(self.store.find_by_name('Same'), a)

    def test_edit_mutates_in_place(self):
        product = self.store.add('Widget', 5, 10)
        self.store.edit(0, 'Widget XL', '7.5', '4')
        self.assertIs(self.store.products[0], product)
        self.assertEqual(self.store.rows(), [('Widget XL', 7.5, 4)])
        self.assertEqual(self._file_lines(), ['Widget XL,7.5,4'])

    def test_edit_checks_selection_before_input(self):
        self.store.add('Widget', 5, 10)
        with self.assertRaises(SelectionError) as ctx:
            self.store.edit(None, 'x', 'bad', 'bad')
        self.assertEqual(str(ctx.exception), 'Please select a product to edit.')
        with self.assertRaises(SelectionError):
            self.store.edit(3, 'x', 1, 1)
        with self.assertRaises(InputError):
            self.store.edit(0, 'x', 'bad', 1)
        self.assertEqual(self.store.rows(), [('Widget', 5.0, 10)])

    def test_delete(self):
        self.store.add('A', 1, 1)
        self.store.add('B', 2, 2)
        self.store.delete(0)
        self.assertEqual(self.store.rows(), [('B', 2.0, 2)])
        self.assertEqual(self._file_lines(), ['B,2.0,2'])
        with self.assertRaises(SelectionError):
            self.store.delete(None)
        with self.assertRaises(SelectionError):
            self.store.delete(-1)

    def test_lookup_by_name(self):
        self.store.add('A', 1, 1)
        self.assertEqual(self.store.lookup('A').name, 'A')
        with self.assertRaises(SelectionError):
            self.store.lookup('Nope')

    def test_load_keeps_rows_before_malformed_line(self):
        with open(self.path, 'w', encoding='utf-8') as fh:
            fh.write('Widget,5.0,10\nskip me\nGadget,4.0,x\nLater,1.0,1\n')
        with self.assertRaises(FileError):
            self.store.load()
        self.assertEqual(self.store.rows(), [('Widget', 5.0, 10)])

    def test_load_accepts_negative_stock(self):
        with open(self.path, 'w', encoding='utf-8') as fh:
            fh.write('Widget,5.0,-3\n')
        self.store.load()
        self.assertEqual(self.store.rows(), [('Widget', 5.0, -3)])

    def test_save_failure_leaves_memory_intact(self):
        store = InventoryStore(InventoryFile(os.path.join(self.tmpdir, 'missing', INVENTORY_FILE)))
        with self.assertRaises(FileError):
            store.add('Widget', 5, 10)
        # append happened before the failed write
        self.assertEqual(store.rows(), [('Widget', 5.0, 10)])


if __name__ == '__main__':
    unittest.main()
