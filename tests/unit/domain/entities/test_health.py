from __future__ import annotations

from overseer.domain.entities import DependencyStatus, ServiceStatus, SystemHealth


def _dependency(name: str, status: ServiceStatus) -> DependencyStatus:
    return DependencyStatus(name=name, status=status)


def test_system_health_is_up_when_every_dependency_is_up() -> None:
    health = SystemHealth.from_dependencies(
        [_dependency("mongo", ServiceStatus.UP), _dependency("nomad", ServiceStatus.UP)]
    )

    assert health.status is ServiceStatus.UP
    assert [dependency.name for dependency in health.dependencies] == ["mongo", "nomad"]


def test_system_health_is_up_without_dependencies() -> None:
    assert SystemHealth.from_dependencies([]).status is ServiceStatus.UP


def test_system_health_down_takes_precedence() -> None:
    health = SystemHealth.from_dependencies(
        [
            _dependency("mongo", ServiceStatus.DEGRADED),
            _dependency("nomad", ServiceStatus.DOWN),
            _dependency("other", ServiceStatus.UNKNOWN),
        ]
    )

    assert health.status is ServiceStatus.DOWN


def test_system_health_degraded_before_unknown() -> None:
    health = SystemHealth.from_dependencies(
        [
            _dependency("mongo", ServiceStatus.UNKNOWN),
            _dependency("nomad", ServiceStatus.DEGRADED),
        ]
    )

    assert health.status is ServiceStatus.DEGRADED


def test_system_health_unknown_when_a_check_is_disabled() -> None:
    health = SystemHealth.from_dependencies(
        [
            _dependency("mongo", ServiceStatus.UP),
            _dependency("nomad", ServiceStatus.UNKNOWN),
        ]
    )

    assert health.status is ServiceStatus.UNKNOWN
