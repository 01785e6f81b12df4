from keypath import Map, Wildcard
from keypath.paths import from_string, match_prefix, match_prefix_string, new


def main() -> None:
    state = Map()
    state[from_string("/interfaces/eth0/mtu")] = 1500
    state[{"name": "eth0", "vrf": "default"}] = {"admin": "up", "oper": "down"}

    print(state[new("interfaces", "eth0", "mtu")])
    print(state.lookup({"vrf": "default", "name": "eth0"}))
    print(state.lookup({"name": "eth1", "vrf": "default"}))

    subscription = new("interfaces", Wildcard, "counters")
    print(match_prefix(subscription, from_string("/interfaces/eth0")))
    print(match_prefix_string(subscription, from_string("/interfaces/eth0/count")))


if __name__ == "__main__":
    main()
