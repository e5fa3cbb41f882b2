import pytest

from interspace.cli import main
from interspace.constellation import Constellation
from interspace.stars import load_star_caches


def test_offline_run_writes_both_files(tmp_path):
    stars = tmp_path / "state" / "stars.json"
    output = tmp_path / "state" / "constellation.json"
    assert main(["--offline", "--stars", str(stars), "--output", str(output)]) == 0

    loaded = Constellation.load(output)
    fresh = Constellation.generate_skeleton()
    assert [c.str_id for c in loaded.comps] == [c.str_id for c in fresh.comps]

    caches = load_star_caches(stars)
    assert {c.comp_str_id for c in caches} == {c.str_id for c in fresh.comps}

    with_source = [c for c in loaded.comps if c.info.source is not None]
    assert with_source
    assert all(c.info.source.stars is None for c in with_source)


def test_second_run_reuses_cache(tmp_path):
    stars = tmp_path / "stars.json"
    output = tmp_path / "constellation.json"
    main(["--offline", "--stars", str(stars), "--output", str(output)])
    first = load_star_caches(stars)
    assert main(["--offline", "--stars", str(stars), "--output", str(output)]) == 0
    assert load_star_caches(stars) == first


def test_unknown_option_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2