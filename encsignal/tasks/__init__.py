from .experiment import Experiment, make_names
from .task import Task, TaskClassif, TaskRegr, TaskClust
from .scoring import Scorer, VarianceScorer, AnovaScorer
from .filtered import to_filtered_task
