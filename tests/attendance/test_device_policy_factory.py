from src.mess_attendance.mess_attendance.attendance.factory import DevicePolicyFactory
from src.mess_attendance.mess_attendance.attendance.policies.allowlist_policy import AllowlistPolicy
from src.mess_attendance.mess_attendance.attendance.policies.bound_device_policy import BoundDevicePolicy
from src.mess_attendance.mess_attendance.core.enums import DevicePolicyMode
from tests.fakes import make_employee


def test_factory_defaults_to_allowlist():
    policy = DevicePolicyFactory().for_mode("allowlist", authorized_devices=["A", "", "B"])

    assert isinstance(policy, AllowlistPolicy)
    assert policy.devices == frozenset({"A", "B"})


def test_factory_bound_device():
    policy = DevicePolicyFactory().for_mode(DevicePolicyMode.BOUND_DEVICE)

    assert isinstance(policy, BoundDevicePolicy)


def test_allowlist_membership():
    policy = AllowlistPolicy(["MASTER-1"])
    emp = make_employee()

    assert policy.check_device(employee=emp, device_id="MASTER-1")
    assert not policy.check_device(employee=emp, device_id="master-1")
    assert not policy.check_device(employee=emp, device_id=None)
