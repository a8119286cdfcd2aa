"""
Step definitions for the change submission and completion polling workflow.
"""

from behave import given, when, then

from dns_change_manager.core.completion_poller import CompletionPoller
from dns_change_manager.core.dns_change_manager import DNSChangeManager
from dns_change_manager.core.models import ChangeRequest, PollConfig
from dns_change_manager.exceptions import PollError, SubmissionError
from dns_change_manager.providers.dns_client import DNSClient
from dns_change_manager.providers.mock_provider import MockDNSProvider


def _build_manager(context, pending_checks):
    context.provider = MockDNSProvider({"pending_checks": pending_checks})
    dns_client = DNSClient(context.config_data, provider=context.provider)
    poller = CompletionPoller(dns_client, clock=context.clock, sleep=context.clock.sleep)
    context.manager = DNSChangeManager(
        context.config_data, dns_client=dns_client, poller=poller
    )


def _request(context, name, action, value, ttl=300):
    return ChangeRequest(
        zone_id=context.test_zone,
        name=name,
        record_type="A",
        action=action,
        values=[value],
        ttl=ttl,
    )


@given("the DNS Change Manager is configured with the mock provider")
def step_impl(context):
    """Configure the manager with the mock provider."""
    context.config_data = {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
    }


@given("changes stay pending for {count:d} status check")
@given("changes stay pending for {count:d} status checks")
def step_impl(context, count):
    """Create a mock provider that reports PENDING for a number of checks."""
    _build_manager(context, count)


@given('a change for "{name}" was submitted earlier')
def step_impl(context, name):
    """Submit a change outside the workflow under test."""
    context.manager.submitter.submit(_request(context, name, "UPSERT", "10.0.0.1"))


@when('I upsert "{name}" A record with value "{value}" and TTL {ttl:d} without waiting')
def step_impl(context, name, value, ttl):
    """Submit an upsert and return right away."""
    context.result = context.manager.update_record(
        _request(context, name, "UPSERT", value, ttl), PollConfig(), no_wait=True
    )


@when('I upsert "{name}" A record with value "{value}" and TTL {ttl:d}')
def step_impl(context, name, value, ttl):
    """Prepare an upsert to be submitted by the wait step."""
    context.request = _request(context, name, "UPSERT", value, ttl)


@when("I wait with a sleep of {sleep:d} seconds and a maximum wait of {max_wait:d} seconds")
def step_impl(context, sleep, max_wait):
    """Submit the prepared change and wait for it."""
    context.handle = context.manager.submitter.submit(context.request)
    context.result = context.manager.poller.await_handle(
        context.handle, PollConfig(interval=sleep, max_wait=max_wait)
    )


@when('I delete "{name}" A record with value "{value}"')
def step_impl(context, name, value):
    """Submit a delete."""
    try:
        context.manager.update_record(
            _request(context, name, "DELETE", value), PollConfig()
        )
    except SubmissionError as e:
        context.error = e


@when(
    'I wait for change "{change_id}" with a sleep of {sleep:d} seconds '
    "and a maximum wait of {max_wait:d} seconds"
)
def step_impl(context, change_id, sleep, max_wait):
    """Wait for a change by id."""
    try:
        context.result = context.manager.wait_for_change(
            change_id, PollConfig(interval=sleep, max_wait=max_wait)
        )
    except PollError as e:
        context.error = e


@then("the change should be reported as complete")
def step_impl(context):
    assert context.error is None, f"Unexpected error: {context.error}"
    assert context.result is True


@then("the change should be reported as timed out")
def step_impl(context):
    assert context.error is None, f"Unexpected error: {context.error}"
    assert context.result is False


@then('the change id should be "{change_id}"')
def step_impl(context, change_id):
    assert context.handle.change_id == change_id
    assert context.handle.raw_id == f"/change/{change_id}"


@then("exactly {count:d} status checks should have been performed")
def step_impl(context, count):
    assert context.provider.status_queries == count, (
        f"Expected {count} status checks, got {context.provider.status_queries}"
    )


@then("more than {seconds:d} seconds should have elapsed")
def step_impl(context, seconds):
    assert context.clock.now > seconds


@then("no time should have been spent sleeping")
def step_impl(context):
    assert context.clock.sleeps == []


@then("the submission should fail with a submission error")
def step_impl(context):
    assert isinstance(context.error, SubmissionError)
    assert context.error.__cause__ is not None


@then('the wait should fail with a poll error for "{change_id}"')
def step_impl(context, change_id):
    assert isinstance(context.error, PollError)
    assert context.error.change_id == change_id
