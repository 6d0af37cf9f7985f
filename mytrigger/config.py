"""load named, seeded edge trackers from YAML configuration files"""
import logging
from os import path
from typing import Dict, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .edgedetector import EdgeTracker, AtomicEdgeTracker
from .exceptions import TriggerConfigException

active_logger = logging.getLogger(__name__)


class TrackerConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: str
    initial: bool = False
    atomic: bool = False


class TrackersConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    trackers: List[TrackerConfig] = []

    @field_validator('trackers')
    @classmethod
    def unique_names(cls, v: List[TrackerConfig]) -> List[TrackerConfig]:
        names = [t.name for t in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f'duplicate tracker names: {duplicates}')
        return v


def load_config(cfg_path: str) -> TrackersConfig:
    """
    read trackers configuration from a YAML file, in the form:

    trackers:
      - name: market_open
        initial: false
      - name: in_play
        atomic: true
    """
    if not path.isfile(cfg_path):
        raise TriggerConfigException(f'configuration file "{cfg_path}" does not exist!')

    active_logger.info(f'reading trackers configuration from path: "{cfg_path}"')
    with open(cfg_path) as f:
        try:
            data = yaml.load(f, Loader=yaml.FullLoader)
        except yaml.YAMLError as e:
            raise TriggerConfigException(f'could not parse YAML in "{cfg_path}": {e}')

    # empty file gives None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TriggerConfigException(f'expected mapping in "{cfg_path}", got "{type(data).__name__}"')

    try:
        return TrackersConfig(**data)
    except ValidationError as e:
        raise TriggerConfigException(f'invalid trackers configuration in "{cfg_path}":\n{e}')


def build_trackers(cfg: TrackersConfig) -> Dict[str, Union[EdgeTracker, AtomicEdgeTracker]]:
    """create a dictionary of seeded trackers, key is tracker name"""
    trackers = dict()
    for t in cfg.trackers:
        cls = AtomicEdgeTracker if t.atomic else EdgeTracker
        trackers[t.name] = cls(t.initial)
        active_logger.debug(f'created tracker "{t.name}": {trackers[t.name]!r}')
    return trackers


def load_trackers(cfg_path: str) -> Dict[str, Union[EdgeTracker, AtomicEdgeTracker]]:
    return build_trackers(load_config(cfg_path))
