class MyTriggerException(Exception):
    pass


class TriggerConfigException(MyTriggerException):
    pass
