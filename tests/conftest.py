import pytest

from codepipeline_status.config import Config


COMMIT = '25c0c3e61c4db2c2cde8b163b3ad096875c1ce08'
REVISION_URL = f'https://github.com/mrz1836/codepipeline-to-github/commit/{COMMIT}'
ENCRYPTED_TOKEN = 'dGVzdC10b2tlbi12YWx1ZQ=='


def execution(status='InProgress', name='SourceCode', url=REVISION_URL):
    return {
        'pipelineExecution': {
            'pipelineName': 'webapp-pipeline',
            'pipelineExecutionId': 'a5ef215c-43b4-4513-b97f-1829f642e0b1',
            'status': status,
            'artifactRevisions': [
                {
                    'name': name,
                    'revisionId': COMMIT,
                    'revisionSummary': 'Some commit message',
                    'revisionUrl': url,
                }
            ]
        }
    }


@pytest.fixture
def event_data():
    return {
        'version': '0',
        'detail-type': 'CodePipeline Pipeline Execution State Change',
        'source': 'aws.codepipeline',
        'region': 'us-east-1',
        'detail': {
            'pipeline': 'webapp-pipeline',
            'execution-id': 'a5ef215c-43b4-4513-b97f-1829f642e0b1',
            'state': 'STARTED',
            'version': 3.0
        }
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    for key in ['AWS_REGION', 'GITHUB_ACCESS_TOKEN', 'APPLICATION_STAGE_NAME',
            'SOURCE_ARTIFACT_NAME', 'GITHUB_API_URL', 'LOG_LEVEL']:
        monkeypatch.delenv(key, raising=False)

    mocker.patch.object(Config, '_tokens', {})


@pytest.fixture
def env_vars(monkeypatch):
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    monkeypatch.setenv('GITHUB_ACCESS_TOKEN', ENCRYPTED_TOKEN)
    monkeypatch.setenv('APPLICATION_STAGE_NAME', 'production')
