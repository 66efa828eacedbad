from __future__ import annotations

import json
import unittest

import support  # noqa: F401

from app.utils.json_ld import dumps_schema, render_json_ld


class TestJsonLd(unittest.TestCase):
    def test_script_breaking_characters_are_escaped(self) -> None:
        schema = {"@type": "Thing", "name": "</script><script>alert(1)</script> & co"}
        dumped = dumps_schema(schema)

        self.assertNotIn("<", dumped)
        self.assertNotIn(">", dumped)
        self.assertNotIn("&", dumped)
        self.assertIn("\\u003c/script\\u003e", dumped)
        self.assertEqual(json.loads(dumped), schema)

    def test_non_ascii_kept_and_compact(self) -> None:
        dumped = dumps_schema({"name": "NutriyAcción", "priceRange": "£300-£5000"})

        self.assertEqual(dumped, '{"name":"NutriyAcción","priceRange":"£300-£5000"}')

    def test_one_script_block_per_schema(self) -> None:
        rendered = render_json_ld([{"@type": "Organization"}, {"@type": "WebSite"}])
        blocks = rendered.split("\n")

        self.assertEqual(len(blocks), 2)
        for block in blocks:
            self.assertTrue(block.startswith('<script type="application/ld+json">'))
        self.assertEqual(blocks[1], '<script type="application/ld+json">{"@type":"WebSite"}</script>')

    def test_nothing_to_render(self) -> None:
        self.assertEqual(render_json_ld([]), "")
