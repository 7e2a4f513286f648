from graphadt.config import SEARCH_CONFIG, SearchConfig


def test_defaults():
    config = SearchConfig()
    assert config.default_max_retraversals == 1
    assert config.default_strategy == "BFS"
    assert config.frontier_warning_threshold == 1_000_000


def test_should_warn():
    config = SearchConfig(frontier_warning_threshold=10)
    assert not config.should_warn(10)
    assert config.should_warn(11)


def test_zero_threshold_disables_warning():
    config = SearchConfig(frontier_warning_threshold=0)
    assert not config.should_warn(10**9)


def test_global_instance():
    assert isinstance(SEARCH_CONFIG, SearchConfig)
