"""
Test DataFrame Export - collections to polars DataFrames
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
import polars as pl
from simplecurl.coreutils.env import TransformerSettings
from simplecurl.models.base import ApiModel
from simplecurl.models.registry import ModelRegistry
from simplecurl.transformation.frames import collection_to_frame, to_row
from simplecurl.transformation.transformer import ResponseTransformer


class Pool(ApiModel):
    fillable = ["pool_id", "tvl_usd"]


POOLS_PAYLOAD = (
    '{"data": ['
    '{"pool_id": "a", "tvl_usd": 1.5, "chain": "Base"},'
    '{"pool_id": "b", "tvl_usd": 2.5}'
    "]}"
)


class TestToDataFrame(unittest.TestCase):
    def setUp(self):
        registry = ModelRegistry()
        registry.register(Pool)
        self.transformer = ResponseTransformer(
            registry=registry, settings=TransformerSettings(data_key="data")
        ).set_response(POOLS_PAYLOAD)

    def test_models_become_rows_of_whitelisted_columns(self):
        df = self.transformer.to_dataframe(Pool)

        self.assertEqual(df.columns, ["pool_id", "tvl_usd"])
        self.assertEqual(df.height, 2)
        self.assertEqual(df["tvl_usd"].to_list(), [1.5, 2.5])

    def test_documents_keep_all_keys(self):
        df = self.transformer.to_dataframe()

        self.assertEqual(df.columns, ["pool_id", "tvl_usd", "chain"])
        self.assertEqual(df["chain"].to_list(), ["Base", None])

    def test_schema_is_applied(self):
        schema = pl.Schema([("pool_id", pl.String()), ("tvl_usd", pl.Float32())])

        df = self.transformer.to_dataframe(Pool, schema=schema)

        self.assertEqual(df.schema, schema)

    def test_empty_response_gives_empty_frame(self):
        df = self.transformer.set_response('{"data": []}').to_dataframe(Pool)

        self.assertEqual(df.height, 0)


class TestCollectionToFrame(unittest.TestCase):
    def test_to_row(self):
        self.assertEqual(to_row(Pool(pool_id="a")), {"pool_id": "a"})
        self.assertEqual(to_row({"x": 1}), {"x": 1})
        self.assertEqual(to_row(5), {"value": 5})

    def test_scalars_use_value_column(self):
        df = collection_to_frame([1, 2, 3])

        self.assertEqual(df.columns, ["value"])
        self.assertEqual(df["value"].to_list(), [1, 2, 3])

    def test_keys_first_seen_late_are_kept(self):
        rows = [{"name": f"n{i}"} for i in range(150)]
        rows.append({"name": "last", "created_at": "2024-01-01"})

        df = collection_to_frame(rows)

        self.assertEqual(df.columns, ["name", "created_at"])
        self.assertEqual(df.height, 151)
        self.assertEqual(df["created_at"].to_list()[-1], "2024-01-01")
        self.assertIsNone(df["created_at"].to_list()[0])

    def test_models_with_late_values_keep_them(self):
        models = [Pool(pool_id=str(i)) for i in range(120)]
        models.append(Pool(pool_id="x", tvl_usd=3.0))

        df = collection_to_frame(models)

        self.assertEqual(df.columns, ["pool_id", "tvl_usd"])
        self.assertEqual(df["tvl_usd"].to_list()[-1], 3.0)

    def test_empty_collection_with_schema(self):
        schema = pl.Schema([("pool_id", pl.String())])

        df = collection_to_frame([], schema=schema)

        self.assertEqual(df.height, 0)
        self.assertEqual(df.columns, ["pool_id"])


if __name__ == "__main__":
    unittest.main()
