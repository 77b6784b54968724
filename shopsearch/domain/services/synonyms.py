"""
Built-in bilingual keyword groups of the storefront.

Each key is the canonical (Bengali) term; the value lists its equivalents in
English and alternate Bengali spellings. Hosts can inject their own table
through EngineConfig.synonym_table.
"""
from typing import Dict, List

DEFAULT_SYNONYM_TABLE: Dict[str, List[str]] = {
    "গিফট": ["gift", "present", "উপহার"],
    "টি-শার্ট": ["tshirt", "t-shirt", "shirt"],
    "মগ": ["mug", "cup", "কাপ"],
    "কাস্টম": ["custom", "customize", "personalized"],
    "ফ্যাশন": ["fashion", "style", "clothing"],
    "ইলেকট্রনিক্স": ["electronics", "gadget", "device"],
}
