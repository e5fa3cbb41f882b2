# interspace

A catalogue of the components that make up user-interface stacks, and the
paths that connect them. The catalogue covers language bridges, UI
frameworks, layout engines, painters, rasterisers, graphics APIs, graphics
translation layers and platforms.

## Path notation

Each component declares the paths it can take through the stack in a small
notation:

- `$` stands for the component itself and must appear exactly once per line;
- other names refer to other components;
- a trailing `*` continues with every path of the component in front of it;
- `,` ends a line.

`interspace.parsetree.parse_tree("$ Skia *, $ Cpu")` returns
`[["$", "Skia", "*"], ["$", "Cpu"]]` and raises `ParseTreeError` (a
`ValueError`) on invalid input. `parse_typed_tree` additionally resolves
each name to its block type from a mapping of block types to variant names,
and `validate_block_variants` checks such a mapping. `suggest_names` offers
close matches for a misspelled name.

## Using the library

```python
from interspace.constellation import Constellation, catalog_entries
from interspace.model import ComponentType

constellation = Constellation.generate_skeleton(catalog_entries())
skia = constellation.get_comp_by_str_id("Skia")
rasterisers = constellation.get_all_comps_of_comp_typ(ComponentType.RASTER)
google_ids = constellation.get_all_ids_of_owner("Google")

constellation.store("constellation.json")
same = Constellation.load("constellation.json")
```

`generate_skeleton` expands every `*`, drops paths that visit a component
twice and drops duplicate paths; each `Component` then holds, in `paths`,
the expanded id paths it takes part in. `store` and `load` use JSON.

The data model lives in `interspace.model` (`Component`, `Info`, `Repo`,
the per-type extras, `StarCache`) and `interspace.lang` (`Lang` with its
`info()` display name and execution model).

Components can be narrowed down with the filters in `interspace.filters`
(`ComponentIdFilter`, `ComponentTypeFilter`, `OwnerFilter`); each has a
`toggle` method and a `filter(comp)` predicate.

`interspace.styling` computes stage column widths (`size_stage_widths`),
the CSS rules that apply them (`grid_style`), and a block's background
colour derived from its owner's name (`owner_background`).

## Regenerating the data

```
interspace-regen
```

Options:

- `--stars PATH`: star cache file (default `res/state/stars.json`);
- `--output PATH`: constellation output file (default
  `res/state/constellation.json`);
- `--offline`: do not contact the network; star counts are left empty.

The command refreshes the cached repository star counts, builds the
constellation, folds the star counts into it and stores the result. A cache
entry is refreshed when it is more than a day old or its repository changed.
Only repositories on github.com have their stars fetched, from the GitHub
API. A missing or unreadable cache file is replaced by a new one.

## What this package does not do

It does not display the component table. There is no screen, browser view
or interactive widget. `interspace.styling` only computes widths, CSS text
and colours from numbers you measure and pass in yourself.

## Running the tests

```
pip install .[test]
pytest
```