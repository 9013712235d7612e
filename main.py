import logging
import os

from codepipeline_status import pipeline
from codepipeline_status.config import Config
from codepipeline_status.event import Event, IrrelevantEvent
from codepipeline_status.provider import Provider


logger = logging.getLogger()


def configure_logging():
    name = os.environ.get('LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        logger.setLevel(logging.INFO)
        logger.warning("Unknown LOG_LEVEL %r, using INFO", name)
    else:
        logger.setLevel(level)


configure_logging()


def pipeline_status(event, context):
    """
    Lambda function to be triggered by EventBridge.

    Updates the commit status of the revision built by a CodePipeline
    execution. Triggered by CodePipeline Pipeline Execution State Change
    events.
    """

    event = Event(event)
    logger.info("Received %s event for execution %s of pipeline %s",
            event.state, event.execution_id, event.pipeline)

    config = Config.load()
    execution = pipeline.get_execution(
            config.region, event.pipeline, event.execution_id)

    try:
        provider = Provider.create_from_execution(execution, config)
    except IrrelevantEvent as e:
        logger.warning("Ignoring CodePipeline event because it is not "
                "related to a supported repository: %s", e)
    else:
        provider.send_status()

    return "OK"
