import logging

import pytest

from mytrigger.config import TrackerConfig, TrackersConfig, load_config, build_trackers, load_trackers
from mytrigger.edgedetector import EdgeTracker, AtomicEdgeTracker
from mytrigger.exceptions import TriggerConfigException, MyTriggerException


def write(tmp_path, txt):
    p = tmp_path / 'trackers.yaml'
    p.write_text(txt)
    return str(p)


class TestLoadConfig:
    def test_load(self, tmp_path):
        cfg = load_config(write(tmp_path, (
            'trackers:\n'
            '  - name: market_open\n'
            '  - name: in_play\n'
            '    initial: true\n'
            '    atomic: true\n'
        )))
        assert cfg.trackers == [
            TrackerConfig(name='market_open'),
            TrackerConfig(name='in_play', initial=True, atomic=True),
        ]

    def test_empty_file(self, tmp_path):
        assert load_config(write(tmp_path, '')).trackers == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(TriggerConfigException):
            load_config(str(tmp_path / 'nope.yaml'))

    def test_not_mapping(self, tmp_path):
        with pytest.raises(TriggerConfigException):
            load_config(write(tmp_path, '- a\n- b\n'))

    def test_bad_yaml(self, tmp_path):
        with pytest.raises(TriggerConfigException):
            load_config(write(tmp_path, 'trackers: [\n'))

    def test_extra_field(self, tmp_path):
        with pytest.raises(TriggerConfigException):
            load_config(write(tmp_path, 'trackers:\n  - name: a\n    debounce: 3\n'))

    def test_duplicate_names(self, tmp_path):
        with pytest.raises(MyTriggerException):
            load_config(write(tmp_path, 'trackers:\n  - name: a\n  - name: a\n'))

    def test_logs_path(self, tmp_path, caplog):
        path = write(tmp_path, 'trackers: []\n')
        with caplog.at_level(logging.INFO, logger='mytrigger.config'):
            load_config(path)
        assert path in caplog.text


class TestBuildTrackers:
    def test_build(self):
        trackers = build_trackers(TrackersConfig(trackers=[
            TrackerConfig(name='a'),
            TrackerConfig(name='b', initial=True, atomic=True),
        ]))
        assert set(trackers) == {'a', 'b'}
        assert type(trackers['a']) is EdgeTracker
        assert trackers['a'].state is False
        assert isinstance(trackers['b'], AtomicEdgeTracker)
        assert trackers['b'].state is True
        assert trackers['b'].update(False).fell()

    def test_load_trackers(self, tmp_path):
        trackers = load_trackers(write(tmp_path, 'trackers:\n  - name: x\n    initial: yes\n'))
        assert trackers['x'].state is True
