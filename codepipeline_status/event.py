class InvalidEvent(ValueError):
    pass


class IrrelevantEvent(Exception):
    pass


class Event:
    """
    CodePipeline execution state change, as delivered by EventBridge.
    """

    def __init__(self, event):
        self.data = event or {}

        if not isinstance(self.data, dict) or \
                not isinstance(self.detail, dict) or not self.detail:
            raise InvalidEvent('missing event detail')

        if not self.execution_id:
            raise InvalidEvent('missing param execution-id')

        if not self.pipeline:
            raise InvalidEvent('missing param pipeline')


    @property
    def detail(self):
        return self.data.get('detail')


    @property
    def pipeline(self):
        return self.detail.get('pipeline')


    @property
    def execution_id(self):
        return self.detail.get('execution-id')


    @property
    def state(self):
        return self.detail.get('state')
