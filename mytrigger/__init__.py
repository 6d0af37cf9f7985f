from .changed import Ref, on_changed, on_changed_attr, on_changed_item, StateTracker
from .edgedetector import Signal, EdgeTracker, AtomicEdgeTracker
from .once import RunOnce, run_once
from .config import TrackerConfig, TrackersConfig, load_config, build_trackers, load_trackers
from .customlogging import create_stream_logger
from .exceptions import MyTriggerException, TriggerConfigException
