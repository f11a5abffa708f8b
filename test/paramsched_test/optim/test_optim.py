import logging

import pytest
import torch
from paramsched.log import LOGGER_NAME
from paramsched.optim import ParamGroupScheduler, schedule_lambda_lr
from paramsched.schedule import Lambda, Loop, Sequence
from torch.nn import Linear
from torch.optim import SGD


@pytest.fixture
def optimizer():
    return SGD(Linear(1, 1).parameters(), lr=0.1, momentum=0.9)


@pytest.fixture
def warmup_then_decay():
    return Sequence(
        schedules=[Lambda(lambda t: t / 2), Lambda(lambda t: 1.0 - t / 10)],
        step_sizes=[2, 5]
    )


@pytest.mark.local
def test_lambda_lr(optimizer, warmup_then_decay):
    scheduler = schedule_lambda_lr(optimizer, warmup_then_decay)

    lrs = [optimizer.param_groups[0]["lr"]]
    for _ in range(6):
        optimizer.step()
        scheduler.step()
        lrs.append(optimizer.param_groups[0]["lr"])

    torch.testing.assert_close(
        torch.tensor(lrs),
        torch.tensor([0.1 * warmup_then_decay.at(t) for t in range(1, 8)])
    )
    torch.testing.assert_close(
        torch.tensor(lrs),
        torch.tensor([0.05, 0.1, 0.09, 0.08, 0.07, 0.06, 0.05])
    )


@pytest.mark.local
def test_param_group_scheduler_momentum(optimizer):
    scheduler = ParamGroupScheduler(optimizer, Loop(Sequence(schedules=[0.85, 0.95], step_sizes=[1, 1]), period=2),
                                    key="momentum")

    assert optimizer.param_groups[0]["momentum"] == 0.85
    assert scheduler.current_value == 0.85
    assert scheduler.current_step == 1
    # the learning rate is left untouched
    assert optimizer.param_groups[0]["lr"] == 0.1

    scheduler.step()
    assert optimizer.param_groups[0]["momentum"] == 0.95

    scheduler.step()
    assert optimizer.param_groups[0]["momentum"] == 0.85


@pytest.mark.local
def test_param_group_scheduler_all_groups():
    model = Linear(2, 2)
    optimizer = SGD([{"params": [model.weight]}, {"params": [model.bias], "lr": 1.0}], lr=0.5)

    scheduler = ParamGroupScheduler(optimizer, Lambda(lambda t: 1 / t))
    scheduler.step()

    assert [group["lr"] for group in optimizer.param_groups] == [0.5, 0.5]
    assert scheduler.key == "lr"


@pytest.mark.local
def test_param_group_scheduler_missing_key(optimizer):
    with pytest.raises(KeyError, match="no hyperparameter 'betas'"):
        ParamGroupScheduler(optimizer, Lambda(lambda t: t), key="betas")


@pytest.mark.local
def test_param_group_scheduler_state_dict_roundtrip():
    schedule = Lambda(lambda t: 0.1 * t)
    saver_opt = SGD(Linear(1, 1).parameters(), lr=1.0)
    saver = ParamGroupScheduler(saver_opt, schedule)
    for _ in range(3):
        saver.step()

    state = saver.state_dict()

    loader_opt = SGD(Linear(1, 1).parameters(), lr=1.0)
    loader = ParamGroupScheduler(loader_opt, schedule)
    loader.load_state_dict(state)

    assert loader.current_step == 4
    assert loader_opt.param_groups[0]["lr"] == pytest.approx(0.4)

    loader.step()
    assert loader_opt.param_groups[0]["lr"] == pytest.approx(0.5)


@pytest.mark.local
def test_param_group_scheduler_state_key_mismatch(optimizer):
    state = ParamGroupScheduler(optimizer, Lambda(lambda t: t), key="momentum").state_dict()

    with pytest.raises(ValueError, match="Scheduled key differs"):
        ParamGroupScheduler(optimizer, Lambda(lambda t: t), key="lr").load_state_dict(state)


@pytest.mark.local
def test_param_group_scheduler_rejects_unstarted_state(optimizer):
    scheduler = ParamGroupScheduler(optimizer, Lambda(lambda t: 0.1 * t))

    with pytest.raises(ValueError, match="at least one value"):
        scheduler.load_state_dict({"key": "lr", "iterator": {"step": 0}})

    assert scheduler.current_step == 1
    assert optimizer.param_groups[0]["lr"] == pytest.approx(0.1)


@pytest.mark.local
def test_param_group_scheduler_logging(optimizer, caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        scheduler = ParamGroupScheduler(optimizer, Lambda(lambda t: 0.5 / t), key="momentum")
        scheduler.step()
        scheduler.load_state_dict(scheduler.state_dict())

    assert "Scheduling 'momentum' for 1 param groups" in caplog.text
    assert "Restored 'momentum' schedule at step 2" in caplog.text
