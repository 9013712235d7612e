import logging
from urllib.parse import urlparse

import requests

from codepipeline_status.event import IrrelevantEvent


logger = logging.getLogger(__name__)

CONSOLE_URL = ('https://{region}.console.aws.amazon.com/codesuite/'
        'codepipeline/pipelines/{pipeline}/executions/{execution_id}'
        '/timeline?region={region}')


class Provider:
    def __init__(self, execution, revision, config):
        self.execution = execution
        self.revision = revision
        self.config = config


    def send_status(self):
        logger.info("Setting %s status %r on %s/%s@%s",
                self.__class__.__name__, self.state,
                self.revision.owner, self.revision.repo, self.revision.commit)

        resp = requests.post(
                self.url,
                headers=self.headers,
                json=self.payload,
                timeout=self.timeout)

        if resp.status_code not in [200, 201]:
            raise RuntimeError(f"HTTP {resp.status_code} response from POST {self.url}")


    @property
    def state(self):
        return self.states.get(self.execution.status, self.default_state)


    @property
    def target_url(self):
        return CONSOLE_URL.format(
                region=self.config.region,
                pipeline=self.execution.pipeline,
                execution_id=self.execution.execution_id)


    @staticmethod
    def create_from_execution(execution, config):
        revision = execution.revision(config.source_artifact_name)

        if revision.url is None:
            raise RuntimeError("Invalid revision url "
                    f"{revision.artifact.get('revisionUrl')!r} "
                    f"for commit {revision.commit}")

        if not revision.owner or not revision.repo:
            raise RuntimeError("Could not find owner and repository in "
                    f"revision url {revision.url.geturl()}")

        for klass in Provider.__subclasses__():
            if revision.host in klass.hosts(config):
                return klass(execution, revision, config)

        raise IrrelevantEvent(f"No provider for revision host {revision.host}")


class Github(Provider):
    states = {
        'InProgress' : 'pending',
        'Stopping'   : 'pending',
        'Succeeded'  : 'success',
        'Failed'     : 'failure',
        'Stopped'    : 'failure',
        'Superseded' : 'failure',
        'Cancelled'  : 'failure',
        }
    default_state = 'failure'

    timeout = 10

    # GitHub rejects longer descriptions
    description_limit = 140


    @staticmethod
    def hosts(config):
        hosts = {'github.com', 'www.github.com'}

        # GitHub Enterprise serves the API from the same host as its web UI
        api_host = urlparse(config.github_api_url).hostname
        if api_host and api_host != 'api.github.com':
            hosts.add(api_host)

        return hosts


    @property
    def url(self):
        return (f'{self.config.github_api_url}/'
            f'repos/{self.revision.owner}/{self.revision.repo}'
            f'/statuses/{self.revision.commit}')


    @property
    def headers(self):
        return {
            'Authorization': f'token {self.config.github_token}',
            'Accept': 'application/vnd.github+json',
            }


    @property
    def description(self):
        description = self.execution.status or 'Unknown'
        if self.revision.summary:
            description = f'{description}: {self.revision.summary}'

        return description[:self.description_limit]


    @property
    def payload(self):
        return {
            'state': self.state,
            'target_url': self.target_url,
            'description': self.description,
            'context': f'codepipeline/{self.config.stage_name}',
            }
