"""
Tests for turning aggregated groups into page declarations.
"""

import pytest

from gbhwdb.components.cartridge.aggregation_comp import aggregate
from gbhwdb.components.cartridge.page_declaration_comp import (
    INDEX_TITLE,
    build_index_page,
    build_mapper_page,
    build_page_declarations,
)
from gbhwdb.helpers.dto.config_dto import MapperId
from gbhwdb.helpers.dto.page_dto import CartridgeGroups, IndexPageProps, MapperPageProps


@pytest.fixture
def groups(store, make_submission):
    submissions = [
        make_submission("tetris", index=0),
        make_submission("zelda-links-awakening", kind="MBC1", index=1),
        make_submission("alleyway", index=2),
        make_submission("pokemon-gold", kind="MBC3", index=3),
        make_submission("not-a-game", kind="MBC5", index=4),
    ]
    return aggregate(submissions, store)


@pytest.mark.unit
class TestIndexPage:
    def test_path_and_title(self, groups, store):
        """Test the index page lives at cartridges/index."""
        page = build_index_page(groups, store)
        assert page.type == "index"
        assert page.path == ("cartridges", "index")
        assert page.title == INDEX_TITLE
        assert isinstance(page.props, IndexPageProps)

    def test_games_sorted_by_display_name(self, groups, store):
        """Test games are ordered by name, with the type as name for unknown games."""
        page = build_index_page(groups, store)
        names = [entry.display_name for entry in page.props.games]
        assert names == ["Alleyway", "Pokemon Gold", "Tetris", "The Legend of Zelda: Link's Awakening", "not-a-game"]

    def test_unconfigured_game_has_no_cfg(self, groups, store):
        """Test an unknown game is listed without a config."""
        page = build_index_page(groups, store)
        entry = next(e for e in page.props.games if e.type == "not-a-game")
        assert entry.cfg is None
        assert [s.index for s in entry.submissions] == [4]

    def test_mappers_are_populated_keys(self, groups, store):
        """Test the mapper list equals the by_mapper key set."""
        page = build_index_page(groups, store)
        assert set(page.props.mappers) == set(groups.by_mapper)
        assert set(page.props.mappers) == {MapperId.NO_MAPPER, MapperId.MBC1, MapperId.MBC3, MapperId.MBC5}

    def test_equal_names_tie_break_on_type(self, store, make_submission):
        """Test two games with the same display name sort by type."""
        groups = CartridgeGroups(
            by_game={"zz-game": [make_submission("zz-game")], "aa-game": [make_submission("aa-game")]},
            by_mapper={},
        )
        # Neither game is configured, so the display name is the type itself
        page = build_index_page(groups, store)
        assert [e.type for e in page.props.games] == ["aa-game", "zz-game"]


@pytest.mark.unit
class TestMapperPages:
    def test_mapper_page(self, make_submission):
        """Test path, title and payload of a mapper page."""
        submissions = [make_submission("tetris", kind="MBC1", index=i) for i in range(2)]
        page = build_mapper_page(MapperId.MBC1, submissions)
        assert page.type == "mapper-detail"
        assert page.path == ("cartridges", "mbc1")
        assert page.title == "mbc1"
        assert isinstance(page.props, MapperPageProps)
        assert page.props.mapper is MapperId.MBC1
        assert [s.index for s in page.props.submissions] == [0, 1]

    def test_sentinel_page(self, make_submission):
        """Test the no-mapper group gets a page of its own."""
        page = build_mapper_page(MapperId.NO_MAPPER, [make_submission("tetris")])
        assert page.path == ("cartridges", "no-mapper")


@pytest.mark.unit
class TestPageDeclarations:
    def test_one_index_plus_one_per_mapper(self, groups, store):
        """Test the page count is 1 + number of populated mappers."""
        pages = build_page_declarations(groups, store)
        assert len(pages) == 1 + len(groups.by_mapper)
        assert pages[0].type == "index"
        assert [p.props.mapper for p in pages[1:]] == list(groups.by_mapper)

    def test_paths_are_unique(self, groups, store):
        """Test no two pages share an output path."""
        pages = build_page_declarations(groups, store)
        assert len({p.path for p in pages}) == len(pages)

    def test_empty_groups(self, store):
        """Test an empty batch still declares the index page."""
        pages = build_page_declarations(CartridgeGroups(by_game={}, by_mapper={}), store)
        assert len(pages) == 1
        assert pages[0].props.games == ()
        assert pages[0].props.mappers == ()

    def test_declarations_are_idempotent(self, groups, store):
        """Test building twice from the same groups yields equal declarations."""
        assert build_page_declarations(groups, store) == build_page_declarations(groups, store)
