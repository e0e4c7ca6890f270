import sys
import click
import yaml
from pydantic import ValidationError as PydanticValidationError
from k8s_sidecar_injector.config.config import Config
from k8s_sidecar_injector.core.inject import process
from k8s_sidecar_injector.core.manifest import (
    apply_to_manifest,
    instances_from_manifests,
    workload_from_manifest,
)
from k8s_sidecar_injector.utils.exceptions import SidecarInjectorError
from k8s_sidecar_injector.utils.logger import ComponentLogger

cli_logger = ComponentLogger("INJECTOR_CLI")


@click.group()
def main():
    """Jaeger agent sidecar injector."""


@main.command()
@click.option('--workload', 'workload_file', required=True, type=click.File('r'), help='Workload manifest (YAML), "-" for stdin')
@click.option('--instances', 'instances_file', required=True, type=click.File('r'), help='Jaeger custom resources (YAML, multi-document)')
@click.option('--config-file', 'config_file', help='Path to JSON configuration overrides')
@click.option('--output', 'output_file', default='-', type=click.File('w'), help='Where to write the mutated manifest')
def inject(workload_file, instances_file, config_file: str, output_file):
    """
    Print the workload manifest with the Jaeger agent sidecar injected.
    Args:
        workload_file: Workload manifest
        instances_file: Jaeger instances to choose from
        config_file: Path to configuration file
        output_file: Destination of the mutated manifest
    """
    try:
        config = Config(Config.load_config(config_file)) if config_file else Config()
        settings = config.sidecar_settings

        manifest = yaml.safe_load(workload_file)
        workload = workload_from_manifest(manifest)
        instances = instances_from_manifests(yaml.safe_load_all(instances_file))

        cli_logger.log_structured(
            level="DEBUG",
            message="Loaded manifests",
            workload=workload.key,
            extra={"instances": [i.name for i in instances], "image": settings.image},
        )

        mutated = process(workload, instances, settings)
        yaml.safe_dump(apply_to_manifest(manifest, mutated), output_file, sort_keys=False)
    except yaml.YAMLError as e:
        cli_logger.log_structured(
            level="ERROR",
            message=f"Invalid YAML input: {e}",
            extra={"error": str(e)}
        )
        sys.exit(1)
    except (SidecarInjectorError, PydanticValidationError) as e:
        cli_logger.log_structured(
            level="ERROR",
            message=f"Cannot inject sidecar: {e}",
            extra={"error_type": type(e).__name__}
        )
        sys.exit(1)


if __name__ == '__main__':
    main()
