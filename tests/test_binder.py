import pytest

from ymbase.binder import Binder, BindMgr


class Recorder(Binder):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def event_proc(self, *args):
        self.log.append((self.name, args))


def test_binder_is_abstract():
    with pytest.raises(TypeError):
        Binder()


def test_new_binder_has_no_manager():
    b = Recorder("a", [])
    mgr = BindMgr()
    assert b.mgr() is None
    assert b not in mgr
    assert len(mgr) == 0


def test_register_sets_manager():
    mgr = BindMgr()
    b = Recorder("a", [])
    mgr.reg_binder(b)
    assert b.mgr() is mgr
    assert b in mgr
    assert len(mgr) == 1


def test_prop_event_reaches_all_in_order():
    log = []
    mgr = BindMgr()
    mgr.reg_binder(Recorder("a", log))
    mgr.reg_binder(Recorder("b", log))
    mgr.prop_event(1, "x", 2.5)
    assert log == [("a", (1, "x", 2.5)), ("b", (1, "x", 2.5))]


def test_prop_event_without_arguments():
    log = []
    mgr = BindMgr()
    mgr.reg_binder(Recorder("a", log))
    mgr.prop_event()
    assert log == [("a", ())]


def test_unreg_binder_stops_events():
    log = []
    mgr = BindMgr()
    a = Recorder("a", log)
    b = Recorder("b", log)
    mgr.reg_binder(a)
    mgr.reg_binder(b)
    mgr.unreg_binder(a)
    mgr.prop_event(7)
    assert log == [("b", (7,))]
    assert a.mgr() is None
    assert mgr.binders == (b,)


def test_unreg_unknown_binder_is_ignored():
    mgr = BindMgr()
    a = Recorder("a", [])
    other = Recorder("o", [])
    mgr.reg_binder(a)
    mgr.unreg_binder(other)
    assert mgr.binders == (a,)


def test_unreg_all_binders():
    log = []
    mgr = BindMgr()
    binders = [Recorder(name, log) for name in "abc"]
    for b in binders:
        mgr.reg_binder(b)
    mgr.unreg_all_binders()
    mgr.prop_event(1)
    assert log == []
    assert len(mgr) == 0
    assert all(b.mgr() is None for b in binders)


def test_reregister_moves_to_new_manager():
    log = []
    first = BindMgr()
    second = BindMgr()
    b = Recorder("a", log)
    first.reg_binder(b)
    second.reg_binder(b)
    assert b.mgr() is second
    assert b not in first
    first.prop_event(1)
    second.prop_event(2)
    assert log == [("a", (2,))]


def test_register_twice_same_manager_keeps_one_entry():
    log = []
    mgr = BindMgr()
    b = Recorder("a", log)
    mgr.reg_binder(b)
    mgr.reg_binder(b)
    mgr.prop_event(3)
    assert log == [("a", (3,))]
    assert len(mgr) == 1


def test_unbind_detaches():
    mgr = BindMgr()
    b = Recorder("a", [])
    mgr.reg_binder(b)
    b.unbind()
    assert b.mgr() is None
    assert b not in mgr


def test_reg_non_binder_raises():
    mgr = BindMgr()
    with pytest.raises(TypeError):
        mgr.reg_binder(object())


def test_binder_unregistering_during_event_does_not_skip_others():
    log = []
    mgr = BindMgr()

    class SelfRemoving(Binder):
        def event_proc(self, *args):
            log.append(("self", args))
            self.unbind()

    mgr.reg_binder(SelfRemoving())
    mgr.reg_binder(Recorder("b", log))
    mgr.prop_event(5)
    assert log == [("self", (5,)), ("b", (5,))]
    assert len(mgr) == 1