"""
Conversion between Kubernetes manifests and injector models.

Workloads are read from ``apps/v1`` style objects (anything with a pod
template under ``spec.template``) or from bare pods. Jaeger instances are
read from ``jaegertracing.io`` custom resources, whose agent options live in
``spec.agent.options``.
"""

import copy
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError as PydanticValidationError

from k8s_sidecar_injector.core.types import BackendInstance, Container, Workload
from k8s_sidecar_injector.utils.exceptions import ManifestError

JAEGER_KIND = "Jaeger"


def _pod_template(manifest: Dict[str, Any]) -> Dict[str, Any]:
    kind = manifest.get("kind") or ""
    spec = manifest.get("spec") or {}
    if kind == "Pod":
        return {"metadata": manifest.get("metadata") or {}, "spec": spec}
    template = spec.get("template")
    if not isinstance(template, dict):
        raise ManifestError(f"{kind or 'Manifest'} has no pod template", kind=kind, field="spec.template")
    return template


def _container_from_manifest(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": raw.get("name", ""),
        "image": raw.get("image", ""),
        "args": [str(a) for a in raw.get("args") or []],
        "env": [{"name": e["name"], "value": str(e.get("value", ""))} for e in raw.get("env") or []],
        "resource_limits": {
            kind: str(q) for kind, q in ((raw.get("resources") or {}).get("limits") or {}).items()
        },
    }


def container_to_manifest(container: Container) -> Dict[str, Any]:
    manifest: Dict[str, Any] = {"name": container.name, "image": container.image}
    if container.args:
        manifest["args"] = list(container.args)
    if container.env:
        manifest["env"] = [{"name": e.name, "value": e.value} for e in container.env]
    if container.ports:
        manifest["ports"] = [
            {"name": p.name, "containerPort": p.container_port, "protocol": p.protocol}
            for p in container.ports
        ]
    if container.resource_limits:
        manifest["resources"] = {"limits": {kind: str(q) for kind, q in container.resource_limits.items()}}
    return manifest


def workload_from_manifest(manifest: Dict[str, Any]) -> Workload:
    """
    Build a Workload from a Deployment-like manifest.

    Annotations and namespace come from the object's metadata, labels from
    the pod template.

    Raises:
        ManifestError: if the manifest has no usable pod template
    """
    if not isinstance(manifest, dict):
        raise ManifestError("Workload manifest must be a mapping")
    kind = manifest.get("kind") or ""
    metadata = manifest.get("metadata") or {}
    template = _pod_template(manifest)
    containers = (template.get("spec") or {}).get("containers") or []
    if not containers:
        raise ManifestError(f"{kind or 'Manifest'} has no containers", kind=kind, field="containers")

    try:
        return Workload(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            annotations={k: str(v) for k, v in (metadata.get("annotations") or {}).items()},
            labels={k: str(v) for k, v in ((template.get("metadata") or {}).get("labels") or {}).items()},
            containers=[_container_from_manifest(c) for c in containers],
        )
    except (KeyError, TypeError, PydanticValidationError) as e:
        raise ManifestError(f"Invalid {kind or 'workload'} manifest: {e}", kind=kind) from e


def apply_to_manifest(manifest: Dict[str, Any], workload: Workload) -> Dict[str, Any]:
    """
    Copy the injector's changes back onto ``manifest``.

    Fields the injector does not model (``valueFrom``, probes, volumes) are
    kept: existing containers only receive the env entries they lack, and
    containers beyond the original ones are appended. Returns a new dict.
    """
    result = copy.deepcopy(manifest)
    template = _pod_template(result)
    if result.get("kind") == "Pod":
        result["spec"] = template["spec"]
    raw_containers: List[Dict[str, Any]] = template.setdefault("spec", {}).setdefault("containers", [])

    for index, container in enumerate(workload.containers):
        if index >= len(raw_containers):
            raw_containers.append(container_to_manifest(container))
            continue
        raw_env = raw_containers[index].get("env") or []
        present = {e.get("name") for e in raw_env}
        added = [{"name": e.name, "value": e.value} for e in container.env if e.name not in present]
        if added:
            raw_containers[index]["env"] = raw_env + added
    return result


def instance_from_manifest(manifest: Dict[str, Any]) -> BackendInstance:
    metadata = manifest.get("metadata") or {}
    agent = (manifest.get("spec") or {}).get("agent") or {}
    try:
        return BackendInstance(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            options=agent.get("options") or {},
        )
    except PydanticValidationError as e:
        raise ManifestError(f"Invalid Jaeger manifest: {e}", kind=JAEGER_KIND) from e


def instances_from_manifests(documents: Iterable[Any]) -> List[BackendInstance]:
    """
    Collect the Jaeger instances found in a set of YAML documents.

    ``List`` documents (as printed by ``kubectl get -o yaml``) are expanded;
    documents of other kinds are ignored.
    """
    instances: List[BackendInstance] = []
    for doc in documents:
        if not isinstance(doc, dict):
            continue
        if (doc.get("kind") or "").endswith("List"):
            instances.extend(instances_from_manifests(doc.get("items") or []))
        elif doc.get("kind") == JAEGER_KIND:
            instances.append(instance_from_manifest(doc))
    return instances
