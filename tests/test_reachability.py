from ocnet.petri_net import ObjectCentricPetriNet
from ocnet.reachability import ReachabilityCache


def test_reachability_simple():
    net = ObjectCentricPetriNet()
    p1 = net.add_place("P1", "A", True, False)
    p2 = net.add_place("P2", "A", False, True)
    p3 = net.add_place("P3", "A", False, True)

    t1 = net.add_transition("T1", "Transition 1", False)
    t2 = net.add_transition("T2", None, True)

    net.add_input_arc(p1.id, t1.id, False, 1)
    net.add_output_arc(t1.id, p2.id, False, 1)
    net.add_input_arc(p2.id, t2.id, True, 2)
    net.add_output_arc(t2.id, p3.id, True, 2)
    net.add_input_arc(p1.id, t2.id, False, 1)

    cache = ReachabilityCache(net)

    assert cache.is_reachable(p1.id, p3.id)
    assert cache.is_reachable(p1.id, p2.id)
    assert cache.is_reachable(p1.id, p1.id)
    assert not cache.is_reachable(p3.id, p1.id)
    assert cache.is_reachable(p2.id, p3.id)


def test_reachability_cycle():
    net = ObjectCentricPetriNet()
    p1 = net.add_place("P1", "A", True, False)
    p2 = net.add_place("P2", "A", False, False)

    t1 = net.add_transition("T1", None, False)
    t2 = net.add_transition("T2", None, False)

    net.add_input_arc(p1.id, t1.id, False, 1)
    net.add_output_arc(t1.id, p2.id, False, 1)
    net.add_input_arc(p2.id, t2.id, False, 1)
    net.add_output_arc(t2.id, p1.id, False, 1)

    cache = ReachabilityCache(net)

    assert cache.is_reachable(p1.id, p2.id)
    assert cache.is_reachable(p2.id, p1.id)
    assert cache.is_reachable(p1.id, p1.id)


def test_reachability_disconnected():
    net = ObjectCentricPetriNet()
    p1 = net.add_place("P1", "A", True, False)
    p2 = net.add_place("P2", "B", True, False)
    p3 = net.add_place("P3", "A", False, True)

    t1 = net.add_transition("T1", None, False)

    net.add_input_arc(p1.id, t1.id, False, 1)
    net.add_output_arc(t1.id, p3.id, False, 1)

    cache = ReachabilityCache(net)

    assert cache.is_reachable(p1.id, p3.id)
    assert not cache.is_reachable(p2.id, p3.id)
    assert not cache.is_reachable(p1.id, p2.id)


def test_different_object_types_block_reachability():
    net = ObjectCentricPetriNet()
    p1 = net.add_place("P1", "order", True, False)
    p2 = net.add_place("P2", "item", False, True)

    t1 = net.add_transition("T1", None, False)
    net.add_input_arc(p1.id, t1.id, False, 1)
    net.add_output_arc(t1.id, p2.id, False, 1)

    cache = ReachabilityCache(net)

    assert not cache.is_reachable(p1.id, p2.id)


def test_results_are_cached():
    net = ObjectCentricPetriNet()
    p1 = net.add_place("P1", "A", True, False)
    p2 = net.add_place("P2", "A", False, True)
    t1 = net.add_transition("T1", None, False)
    net.add_input_arc(p1.id, t1.id, False, 1)

    cache = ReachabilityCache(net)
    assert not cache.is_reachable(p1.id, p2.id)

    net.add_output_arc(t1.id, p2.id, False, 1)

    assert not cache.is_reachable(p1.id, p2.id)
    assert ReachabilityCache(net).is_reachable(p1.id, p2.id)


def test_reachability_over_longer_chain_is_directional():
    net = ObjectCentricPetriNet()
    places = [net.add_place(f"P{i}", "A") for i in range(5)]
    for source, target in zip(places, places[1:]):
        transition = net.add_transition(f"{source.name}->{target.name}")
        net.add_input_arc(source.id, transition.id)
        net.add_output_arc(transition.id, target.id)

    cache = ReachabilityCache(net)

    assert cache.is_reachable(places[0].id, places[4].id)
    assert cache.is_reachable(places[1].id, places[3].id)
    assert not cache.is_reachable(places[4].id, places[0].id)
    assert not cache.is_reachable(places[3].id, places[2].id)