import numpy as np
import pytest

from encsignal.tasks import (
    Experiment, TaskClassif, TaskRegr, TaskClust, AnovaScorer, VarianceScorer, make_names, to_filtered_task
)


@pytest.fixture
def experiment():
    # 4 features x 6 samples; variance grows with the feature index, "f-3" separates the classes
    assay = np.array([
        [1.0, 1.0, 1.0, 1.0, 1.0, 1.0],
        [1.0, 2.0, 1.0, 2.0, 1.0, 2.0],
        [0.0, 5.0, 10.0, 0.0, 5.0, 10.0],
        [0.0, 0.0, 0.0, 3.0, 3.0, 3.0],
    ])
    return Experiment(
        assay=assay,
        features=("f0", "f 1", "2f", "f-3"),
        samples=tuple(f"s{i}" for i in range(6)),
        coldata={"group": ["a", "a", "a", "b", "b", "b"], "age": [30, 40, 50, 60, 70, 80]},
    )


class TestMakeNames:
    def test_sanitize(self):
        assert make_names(["f0", "f 1", "2f", "f-3", ".5x", "_a"]) == ["f0", "f.1", "X2f", "f.3", "X.5x", "X_a"]

    def test_unique(self):
        assert make_names(["a", "a", "a"]) == ["a", "a.1", "a.2"]
        assert make_names(["a b", "a.b"]) == ["a.b", "a.b.1"]
        assert make_names(["a", "a"], unique=False) == ["a", "a"]


class TestExperiment:
    def test_shape_checked(self):
        with pytest.raises(ValueError):
            Experiment(np.zeros((2, 3)), ("a", "b"), ("s1", "s2"))

    def test_coldata_checked(self):
        with pytest.raises(ValueError):
            Experiment(np.zeros((1, 2)), ("a", ), ("s1", "s2"), {"group": ["x"]})

    def test_column(self, experiment):
        assert experiment["group"].tolist() == ["a", "a", "a", "b", "b", "b"]
        assert experiment.shape == (4, 6)


class TestScorers:
    def test_variance_order(self, experiment):
        task = TaskClust("t", experiment.assay.T, make_names(experiment.features))
        ranked = VarianceScorer()(task)
        assert [f for f, _ in ranked] == ["X2f", "f.3", "f.1", "f0"]
        assert ranked[-1][1] == 0.0

    def test_anova_requires_target(self, experiment):
        task = TaskClust("t", experiment.assay.T, make_names(experiment.features))
        with pytest.raises(ValueError):
            AnovaScorer()(task)


class TestFilteredTask:
    def test_classif_by_variance(self, experiment):
        task = to_filtered_task("creb", experiment, classvar="group", nfeat=2)
        assert isinstance(task, TaskClassif)
        assert task.id == "creb"
        assert task.features == ("X2f", "f.3")
        assert task.data.shape == (6, 2)
        assert task.target == "group"
        assert task.classes == ["a", "b"]
        np.testing.assert_array_equal(task.column("f.3"), [0, 0, 0, 3, 3, 3])

    def test_default_is_variance(self, experiment):
        default = to_filtered_task("t", experiment, classvar="group", nfeat=2)
        explicit = to_filtered_task("t", experiment, classvar="group", nfeat=2, scorer=VarianceScorer())
        assert default.features == explicit.features

    def test_anova_strategy(self, experiment):
        task = to_filtered_task("creb", experiment, classvar="group", nfeat=1, scorer=AnovaScorer())
        assert task.features == ("f.3", )

    def test_custom_scorer(self, experiment):
        def reverse(task):
            return [(f, float(i)) for i, f in enumerate(task.features)][::-1]

        task = to_filtered_task("t", experiment, classvar="group", nfeat=1, scorer=reverse)
        assert task.features == ("f.3", )

    def test_nfeat_larger_than_features(self, experiment):
        task = to_filtered_task("t", experiment, classvar="group", nfeat=100)
        assert task.ncol == 4

    def test_without_classvar(self, experiment):
        task = to_filtered_task("t", experiment, nfeat=3, tmaker=TaskClust)
        assert task.target is None and task.y is None
        assert task.features == ("X2f", "f.3", "f.1")

    def test_classif_requires_classvar(self, experiment):
        with pytest.raises(ValueError):
            to_filtered_task("t", experiment, nfeat=3)

    def test_regression(self, experiment):
        task = to_filtered_task("t", experiment, classvar="age", nfeat=2, tmaker=TaskRegr)
        assert task.y.dtype == np.float64

    def test_kwargs_forwarded(self, experiment):
        task = to_filtered_task("t", experiment, classvar="group", nfeat=2, positive="b")
        assert task.positive == "b"
        with pytest.raises(ValueError):
            to_filtered_task("t", experiment, classvar="group", nfeat=2, positive="c")

    def test_invalid_nfeat(self, experiment):
        with pytest.raises(ValueError):
            to_filtered_task("t", experiment, classvar="group", nfeat=0)
