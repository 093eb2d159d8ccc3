"""Tests for domain/factory.py — node validation and tree compilation."""

import dataclasses

import pytest

from decision_tree.domain.actions import (
    ConditionAction,
    LoopAction,
    SendEmailAction,
    SendSmsAction,
    SequentialAction,
)
from decision_tree.domain.errors import ActionValidationError, MissingNodeError
from decision_tree.domain.executor import TreeExecutor
from decision_tree.domain.factory import ActionFactory
from decision_tree.ports.inbound import ActionNode


SMS = {"type": "sms", "params": {"phoneNumber": "+1"}}
EMAIL = {"type": "email", "params": {"sender": "a@x.com", "receiver": "b@x.com"}}


def _chain(node, length):
    tree = dict(node)
    for _ in range(length - 1):
        tree = dict(node, next=tree)
    return tree


@pytest.fixture
def executor():
    return TreeExecutor()


@pytest.fixture
def factory(executor):
    return ActionFactory(executor)


class TestVariants:
    def test_sms(self, factory):
        action = factory.create_action_tree(SMS)
        assert action == SendSmsAction("+1")
        assert action.phone_number == "+1"

    def test_email(self, factory):
        action = factory.create_action_tree(EMAIL)
        assert isinstance(action, SendEmailAction)
        assert (action.sender, action.receiver) == ("a@x.com", "b@x.com")

    def test_condition_binds_branches_and_executor(self, factory, executor):
        action = factory.create_action_tree(
            {"type": "condition", "params": {"expression": "x > 1"}, "trueAction": SMS}
        )
        assert isinstance(action, ConditionAction)
        assert action.expression == "x > 1"
        assert action.true_action == SendSmsAction("+1")
        assert action.false_action is None
        assert action.executor is executor

    def test_loop(self, factory, executor):
        action = factory.create_action_tree({"type": "loop", "params": {"count": 3}, "subtree": EMAIL})
        assert isinstance(action, LoopAction)
        assert action.count == 3
        assert isinstance(action.subtree, SendEmailAction)
        assert action.executor is executor

    def test_loop_integral_float_count(self, factory):
        action = factory.create_action_tree({"type": "loop", "params": {"count": 2.0}})
        assert action.count == 2
        assert isinstance(action.count, int)
        assert action.subtree is None

    def test_accepts_action_node(self, factory):
        assert factory.create_action_tree(ActionNode.from_dict(SMS)) == SendSmsAction("+1")

    def test_actions_are_immutable(self, factory):
        action = factory.create_action_tree(SMS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            action.phone_number = "+2"


class TestBenignEmpty:
    @pytest.mark.parametrize("node_type", ["invalid_type", "SMS", "", "fax"])
    def test_unknown_type(self, factory, node_type, capsys):
        assert factory.create_action_tree({"type": node_type, "params": {}}) is None
        assert "Unknown action type" in capsys.readouterr().err

    def test_missing_type(self, factory):
        assert factory.create_action_tree({"params": {"phoneNumber": "+1"}}) is None

    def test_unknown_root_drops_chain(self, factory):
        assert factory.create_action_tree({"type": "fax", "next": SMS}) is None

    def test_unknown_branch_is_none(self, factory):
        action = factory.create_action_tree(
            {"type": "condition", "params": {"expression": "true"}, "trueAction": {"type": "fax"}}
        )
        assert action.true_action is None

    def test_create_action_ignores_next(self, factory):
        node = ActionNode.from_dict(dict(SMS, next=EMAIL))
        assert factory.create_action(node) == SendSmsAction("+1")


class TestChaining:
    def test_next_wraps_in_sequential(self, factory, executor):
        action = factory.create_action_tree(dict(SMS, next=EMAIL))
        assert isinstance(action, SequentialAction)
        assert action.first == SendSmsAction("+1")
        assert isinstance(action.next, SendEmailAction)
        assert action.executor is executor

    def test_chain_is_right_leaning(self, factory):
        tree = dict(SMS, next=dict(EMAIL, next=SMS))
        action = factory.create_action_tree(tree)
        assert isinstance(action.first, SendSmsAction)
        assert isinstance(action.next, SequentialAction)
        assert isinstance(action.next.first, SendEmailAction)
        assert isinstance(action.next.next, SendSmsAction)

    def test_long_chain_compiles(self, factory, executor):
        action = factory.create_action_tree(_chain(SMS, 3000))
        length = 1
        while isinstance(action, SequentialAction):
            assert action.executor is executor
            length += 1
            action = action.next
        assert length == 3000
        assert action == SendSmsAction("+1")

    def test_unknown_link_ends_chain(self, factory):
        tree = dict(SMS, next=dict(EMAIL, next={"type": "fax", "next": SMS}))
        action = factory.create_action_tree(tree)
        assert action.first == SendSmsAction("+1")
        assert isinstance(action.next, SendEmailAction)

    def test_unknown_next_returns_own_action(self, factory):
        assert factory.create_action_tree(dict(SMS, next={"type": "fax"})) == SendSmsAction("+1")

    def test_nested_branch_honours_next(self, factory):
        action = factory.create_action_tree(
            {"type": "loop", "params": {"count": 1}, "subtree": dict(SMS, next=EMAIL)}
        )
        assert isinstance(action.subtree, SequentialAction)

    def test_identical_branches_are_separate_instances(self, factory):
        action = factory.create_action_tree(
            {
                "type": "condition",
                "params": {"expression": "true"},
                "trueAction": SMS,
                "falseAction": SMS,
            }
        )
        assert action.true_action == action.false_action
        assert action.true_action is not action.false_action


class TestValidation:
    def test_missing_node(self, factory):
        with pytest.raises(MissingNodeError):
            factory.create_action_tree(None)

    def test_create_action_missing_node(self, factory):
        with pytest.raises(MissingNodeError, match="without a node"):
            factory.create_action(None)

    @pytest.mark.parametrize("params", [{}, {"phoneNumber": ""}, {"phoneNumber": 12345}])
    def test_sms_phone_number(self, factory, params):
        with pytest.raises(ActionValidationError, match="SendSmsAction requires 'phoneNumber' parameter"):
            factory.create_action_tree({"type": "sms", "params": params})

    def test_email_missing_both(self, factory):
        with pytest.raises(ActionValidationError, match="'sender' and 'receiver' parameters"):
            factory.create_action_tree({"type": "email", "params": {}})

    def test_email_missing_sender(self, factory):
        with pytest.raises(ActionValidationError, match="SendEmailAction requires 'sender' parameter$"):
            factory.create_action_tree({"type": "email", "params": {"receiver": "b@x.com"}})

    def test_email_missing_receiver(self, factory):
        with pytest.raises(ActionValidationError, match="SendEmailAction requires 'receiver' parameter$"):
            factory.create_action_tree({"type": "email", "params": {"sender": "a@x.com"}})

    @pytest.mark.parametrize("params", [{}, {"expression": ""}, {"expression": "   "}, {"expression": True}])
    def test_condition_expression(self, factory, params):
        with pytest.raises(ActionValidationError, match="ConditionAction requires 'expression' parameter"):
            factory.create_action_tree({"type": "condition", "params": params})

    @pytest.mark.parametrize(
        "count",
        [None, -1, "3", "abc", True, 2.5, float("nan"), float("inf"), [3]],
    )
    def test_loop_count(self, factory, count):
        params = {} if count is None else {"count": count}
        with pytest.raises(ActionValidationError, match="LoopAction requires 'count' parameter"):
            factory.create_action_tree({"type": "loop", "params": params})

    def test_validation_error_is_value_error(self, factory):
        with pytest.raises(ValueError):
            factory.create_action_tree({"type": "sms"})

    def test_invalid_chain_member_fails_whole_tree(self, factory):
        with pytest.raises(ActionValidationError, match="SendEmailAction"):
            factory.create_action_tree(dict(SMS, next={"type": "email", "params": {"sender": "a@x.com"}}))
