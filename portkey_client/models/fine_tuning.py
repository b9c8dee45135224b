"""Fine-tuning job types."""

from typing import Literal

from portkey_client.models.common import ListResponse, PortkeyModel

# "auto" or an explicit number
HyperparameterValue = Literal["auto"] | int | float


class Hyperparameters(PortkeyModel):
    batch_size: HyperparameterValue | None = None
    learning_rate_multiplier: HyperparameterValue | None = None
    n_epochs: HyperparameterValue | None = None


class WandbIntegration(PortkeyModel):
    project: str
    name: str | None = None
    entity: str | None = None
    tags: list[str] | None = None


class Integration(PortkeyModel):
    type: str = "wandb"
    wandb: WandbIntegration


class CreateFineTuningJobRequest(PortkeyModel):
    model: str
    training_file: str
    hyperparameters: Hyperparameters | None = None
    suffix: str | None = None
    validation_file: str | None = None
    integrations: list[Integration] | None = None
    seed: int | None = None


class FineTuningError(PortkeyModel):
    code: str | None = None
    message: str | None = None
    param: str | None = None


class FineTuningJob(PortkeyModel):
    id: str
    object: str = "fine_tuning.job"
    created_at: int
    error: FineTuningError | None = None
    fine_tuned_model: str | None = None
    finished_at: int | None = None
    hyperparameters: Hyperparameters | None = None
    model: str
    organization_id: str | None = None
    result_files: list[str] = []
    status: str
    trained_tokens: int | None = None
    training_file: str
    validation_file: str | None = None
    integrations: list[Integration] | None = None
    seed: int | None = None
    estimated_finish: int | None = None


class ListFineTuningJobsResponse(ListResponse):
    data: list[FineTuningJob]


class FineTuningJobEvent(PortkeyModel):
    id: str
    object: str = "fine_tuning.job.event"
    created_at: int
    level: str
    message: str


class ListFineTuningJobEventsResponse(ListResponse):
    data: list[FineTuningJobEvent]


class FineTuningJobCheckpoint(PortkeyModel):
    id: str
    object: str = "fine_tuning.job.checkpoint"
    created_at: int
    fine_tuned_model_checkpoint: str
    step_number: int
    metrics: dict[str, float] = {}
    fine_tuning_job_id: str


class ListFineTuningJobCheckpointsResponse(ListResponse):
    data: list[FineTuningJobCheckpoint]
