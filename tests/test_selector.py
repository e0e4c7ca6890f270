import pytest

from k8s_sidecar_injector.core.inject import routing_annotation, select
from k8s_sidecar_injector.core.inject.constants import ANNOTATION, ANNOTATION_LEGACY
from k8s_sidecar_injector.core.types import AnyInstance, BackendInstance, NamedInstance


@pytest.fixture
def two_instances():
    return [
        BackendInstance(name="the-first-jaeger-instance-available"),
        BackendInstance(name="the-second-jaeger-instance-available"),
    ]


class TestRoutingAnnotation:

    def test_absent(self, make_workload):
        assert routing_annotation(make_workload()) is None

    def test_empty_value_is_absent(self, make_workload):
        assert routing_annotation(make_workload(annotations={ANNOTATION: ""})) is None

    def test_empty_current_key_falls_back_to_legacy(self, make_workload):
        workload = make_workload(annotations={ANNOTATION: "", ANNOTATION_LEGACY: "legacy-one"})
        assert routing_annotation(workload) == NamedInstance(name="legacy-one")

    def test_any(self, make_workload):
        assert routing_annotation(make_workload(annotations={ANNOTATION: "true"})) == AnyInstance()

    def test_named_legacy(self, make_workload):
        annotation = routing_annotation(make_workload(annotations={ANNOTATION_LEGACY: "tracing"}))
        assert annotation == NamedInstance(name="tracing")

    def test_current_key_wins_over_legacy(self, make_workload):
        workload = make_workload(annotations={ANNOTATION_LEGACY: "legacy-one", ANNOTATION: "current-one"})
        assert routing_annotation(workload) == NamedInstance(name="current-one")


class TestSelect:

    def test_single_instance_for_any(self, make_workload):
        workload = make_workload(annotations={ANNOTATION: "true"})
        only = BackendInstance(name="the-only-jaeger-instance-available")
        selected = select(workload, [only])
        assert selected is not None
        assert selected.name == "the-only-jaeger-instance-available"

    def test_cannot_select_from_multiple_for_any(self, make_workload, two_instances):
        workload = make_workload(annotations={ANNOTATION: "true"})
        assert select(workload, two_instances) is None

    def test_no_available_instances(self, make_workload):
        workload = make_workload(annotations={ANNOTATION: "true"})
        assert select(workload, []) is None

    def test_select_based_on_name(self, make_workload, two_instances):
        workload = make_workload(annotations={ANNOTATION: "the-second-jaeger-instance-available"})
        selected = select(workload, two_instances)
        assert selected is not None
        assert selected.name == "the-second-jaeger-instance-available"

    def test_select_based_on_legacy_name(self, make_workload, two_instances):
        workload = make_workload(annotations={ANNOTATION_LEGACY: "the-first-jaeger-instance-available"})
        assert select(workload, two_instances).name == "the-first-jaeger-instance-available"

    def test_unknown_name(self, make_workload, two_instances):
        workload = make_workload(annotations={ANNOTATION: "non-existing-operator"})
        assert select(workload, two_instances) is None

    def test_unknown_name_with_single_candidate(self, make_workload):
        workload = make_workload(annotations={ANNOTATION: "non-existing-operator"})
        assert select(workload, [BackendInstance(name="my-jaeger")]) is None

    def test_without_annotation(self, make_workload):
        assert select(make_workload(), [BackendInstance(name="my-jaeger")]) is None

    def test_result_does_not_depend_on_candidate_order(self, make_workload, two_instances):
        workload = make_workload(annotations={ANNOTATION: "the-first-jaeger-instance-available"})
        assert select(workload, two_instances) == select(workload, list(reversed(two_instances)))
