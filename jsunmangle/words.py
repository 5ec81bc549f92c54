"""Dictionary of replacement words handed out by :class:`NamePool`."""

from __future__ import annotations

from typing import Tuple

# Every entry is at least three characters long, lower case, and is neither an
# ECMAScript reserved word nor a well known host global.
DICTIONARY: Tuple[str, ...] = (
    "acorn", "actor", "adobe", "agate", "album", "alder", "algae", "alloy",
    "almond", "amber", "anchor", "angle", "ankle", "anvil", "apple", "apron",
    "arbor", "arch", "arena", "arrow", "aspen", "atlas", "attic", "auburn",
    "autumn", "avenue", "badge", "bagel", "bakery", "ballad", "bamboo", "banjo",
    "barley", "barn", "basin", "basket", "bayou", "beacon", "beaver", "bedrock",
    "beetle", "bellow", "berry", "birch", "biscuit", "bishop", "blanket", "blaze",
    "blossom", "bobcat", "bonnet", "border", "boulder", "bramble", "breeze", "brick",
    "bridge", "brook", "bucket", "buffalo", "bugle", "bundle", "butter", "button",
    "cabin", "cactus", "camel", "candle", "canoe", "canyon", "captain", "caramel",
    "cargo", "carpet", "carrot", "castle", "cedar", "cellar", "chalk", "channel",
    "chapel", "cherry", "chimney", "cinder", "citrus", "clover", "cobalt", "cobble",
    "comet", "copper", "coral", "cotton", "cougar", "cradle", "crane", "crater",
    "cricket", "crimson", "crystal", "cupola", "cypress", "daisy", "dazzle", "delta",
    "denim", "desert", "dingo", "dolphin", "donkey", "dragon", "drizzle", "dune",
    "eagle", "easel", "ember", "emerald", "engine", "falcon", "fathom", "feather",
    "fennel", "fern", "ferret", "fiddle", "fjord", "flannel", "flint", "forest",
    "fossil", "fountain", "fox", "freckle", "garden", "garnet", "gazelle", "geyser",
    "ginger", "glacier", "goblet", "gopher", "granite", "gravel", "griddle", "grove",
    "gull", "gusto", "hamlet", "hammer", "harbor", "harvest", "hazel", "heather",
    "hedge", "heron", "hickory", "hollow", "honey", "horizon", "hornet", "husky",
    "iceberg", "igloo", "indigo", "iris", "island", "ivory", "jackal", "jaguar",
    "jasmine", "jelly", "jetty", "jigsaw", "juniper", "kayak", "kernel", "kettle",
    "kiln", "kitten", "koala", "ladder", "lagoon", "lantern", "larch", "lava",
    "lemon", "lentil", "lilac", "linen", "lizard", "lobster", "locket", "lotus",
    "lumber", "lupine", "magnet", "mahogany", "mallet", "mango", "mantle", "maple",
    "marble", "marsh", "meadow", "melon", "mesa", "meteor", "mitten", "monsoon",
    "moose", "mortar", "moss", "muffin", "mulberry", "mustard", "nectar", "needle",
    "nettle", "nickel", "nimbus", "nutmeg", "oasis", "oatmeal", "ocean", "ocelot",
    "olive", "onyx", "orbit", "orchard", "orchid", "osprey", "otter", "oyster",
    "paddle", "pancake", "panda", "panther", "papaya", "parsley", "pebble", "pelican",
    "pepper", "petal", "pewter", "pillow", "pine", "pixel", "plaza", "plum",
    "pocket", "pollen", "poplar", "poppy", "prairie", "pretzel", "puffin", "pumice",
    "pumpkin", "quail", "quarry", "quartz", "quiver", "rabbit", "radish", "raisin",
    "rapids", "raven", "reef", "ribbon", "ridge", "ripple", "river", "robin",
    "rocket", "rooster", "rosemary", "ruby", "saddle", "saffron", "salmon", "sandal",
    "sapling", "sardine", "satchel", "savanna", "scarlet", "sequoia", "shadow", "shovel",
    "shrub", "sienna", "silver", "sketch", "slate", "sleet", "sparrow", "spindle",
    "sprout", "spruce", "squash", "squirrel", "stable", "starling", "stencil", "stone",
    "stream", "summit", "sunset", "swallow", "sycamore", "tablet", "tadpole", "tangle",
    "teapot", "thistle", "thunder", "thyme", "timber", "tinsel", "toffee", "topaz",
    "tornado", "toucan", "trellis", "trout", "tulip", "tundra", "turnip", "turtle",
    "tusk", "twig", "umber", "valley", "velvet", "violet", "viper", "walnut",
    "walrus", "wander", "warbler", "wasp", "waterfall", "weasel", "whisker", "willow",
    "wombat", "yarrow", "yonder", "zephyr", "zinnia", "zodiac",
)

__all__ = ["DICTIONARY"]
