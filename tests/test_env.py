from k8s_sidecar_injector.core.inject import build_env
from k8s_sidecar_injector.core.types import EnvVar


def _pairs(env):
    return [(var.name, var.value) for var in env]


def test_default_namespace(make_workload):
    env = build_env(make_workload(labels={"app": "testapp"}))
    assert _pairs(env) == [("SERVICE_NAME", "testapp.default"), ("PROPAGATION_FORMAT", "jaeger,b3")]


def test_with_namespace(make_workload):
    env = build_env(make_workload(labels={"app": "testapp"}, namespace="mynamespace"))
    assert _pairs(env)[0] == ("SERVICE_NAME", "testapp.mynamespace")


def test_missing_app_label(make_workload):
    env = build_env(make_workload(namespace="ns"))
    assert _pairs(env)[0] == ("SERVICE_NAME", ".ns")


def test_existing_service_name_is_kept(make_workload):
    workload = make_workload(labels={"app": "testapp"}, env=[EnvVar(name="SERVICE_NAME", value="otherapp")])
    assert _pairs(build_env(workload)) == [("SERVICE_NAME", "otherapp"), ("PROPAGATION_FORMAT", "jaeger,b3")]


def test_existing_propagation_is_kept(make_workload):
    workload = make_workload(labels={"app": "testapp"}, env=[EnvVar(name="PROPAGATION_FORMAT", value="tracecontext")])
    assert _pairs(build_env(workload)) == [("PROPAGATION_FORMAT", "tracecontext"), ("SERVICE_NAME", "testapp.default")]


def test_unrelated_entries_keep_their_position(make_workload):
    workload = make_workload(
        labels={"app": "testapp"},
        env=[
            EnvVar(name="LOG_LEVEL", value="debug"),
            EnvVar(name="PROPAGATION_FORMAT", value="w3c"),
            EnvVar(name="PORT", value="8080"),
        ],
    )
    assert _pairs(build_env(workload)) == [
        ("LOG_LEVEL", "debug"),
        ("PROPAGATION_FORMAT", "w3c"),
        ("PORT", "8080"),
        ("SERVICE_NAME", "testapp.default"),
    ]


def test_does_not_touch_the_workload(make_workload):
    workload = make_workload(labels={"app": "testapp"})
    build_env(workload)
    assert workload.primary_container.env == []
