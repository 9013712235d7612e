import logging
from urllib.parse import urlparse

import boto3
from botocore.exceptions import ClientError


logger = logging.getLogger(__name__)


def get_execution(region, pipeline, execution_id):
    if not pipeline:
        raise RuntimeError('Missing pipeline name')

    if not execution_id:
        raise RuntimeError(f"Missing execution id for pipeline {pipeline}")

    client = boto3.client('codepipeline', region_name=region)

    try:
        resp = client.get_pipeline_execution(
                pipelineName=pipeline,
                pipelineExecutionId=execution_id)
    except ClientError as e:
        raise RuntimeError(f"Could not get execution {execution_id} "
                f"of pipeline {pipeline}: {e}")

    if not resp or not resp.get('pipelineExecution'):
        raise RuntimeError(f"No execution {execution_id} found "
                f"for pipeline {pipeline}")

    execution = Execution(resp['pipelineExecution'])
    logger.debug("Execution %s of pipeline %s is %s",
            execution_id, pipeline, execution.status)

    return execution


class Execution:
    def __init__(self, data):
        self.data = data


    @property
    def pipeline(self):
        return self.data.get('pipelineName')


    @property
    def execution_id(self):
        return self.data.get('pipelineExecutionId')


    @property
    def status(self):
        return self.data.get('status')


    @property
    def artifact_revisions(self):
        return self.data.get('artifactRevisions') or []


    def artifact(self, name):
        for artifact in self.artifact_revisions:
            if artifact.get('name') == name:
                return artifact

        return None


    def revision(self, name):
        artifact = self.artifact(name)
        if artifact is None:
            raise RuntimeError(f"No artifact named {name} in execution "
                    f"{self.execution_id} of pipeline {self.pipeline}")

        return Revision(artifact)


class Revision:
    """
    Source revision recorded on a pipeline artifact.

    The url is None when the artifact's revisionUrl is not an absolute
    http(s) URL; owner and repo are then unavailable too.
    """

    def __init__(self, artifact):
        self.artifact = artifact

        if not self.commit:
            raise RuntimeError(
                    f"Artifact {artifact.get('name')} has no revision id")


    @property
    def commit(self):
        return self.artifact.get('revisionId')


    @property
    def summary(self):
        return self.artifact.get('revisionSummary') or ''


    @property
    def url(self):
        url = urlparse(self.artifact.get('revisionUrl') or '')
        if url.scheme not in ('http', 'https') or not url.netloc:
            return None

        return url


    @property
    def host(self):
        return self.url.hostname if self.url else None


    @property
    def path(self):
        return [p for p in self.url.path.split('/') if p] if self.url else []


    @property
    def owner(self):
        return self.path[0] if len(self.path) > 1 else None


    @property
    def repo(self):
        return self.path[1] if len(self.path) > 1 else None
