from zbplugins.chat import AirConditioner, RateLimiter, RateManager, name_reply, poke_reply


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


def test_limiter_burst_and_refill():
    clock = FakeClock()
    limiter = RateLimiter(300, 8, clock)
    assert limiter.acquire(3)
    assert limiter.acquire(3)
    assert not limiter.acquire(3)
    assert limiter.acquire(1)
    assert not limiter.acquire(2)
    clock.now += 300
    assert limiter.acquire(8)
    assert not limiter.acquire(1)


def test_manager_keeps_one_limiter_per_key():
    manager = RateManager(300, 8, FakeClock())
    assert manager.load(1) is manager.load(1)
    assert manager.load(1) is not manager.load(2)


def test_poke_sequence():
    manager = RateManager(300, 8, FakeClock())
    first = poke_reply(manager, 10, "bot")
    assert first == "请不要戳bot >_<"
    assert poke_reply(manager, 10, "bot") == first
    assert poke_reply(manager, 10, "bot") == "喂(#`O′) 戳bot干嘛！"
    assert poke_reply(manager, 10, "bot") == "喂(#`O′) 戳bot干嘛！"
    assert poke_reply(manager, 10, "bot") is None
    # another group has its own bucket
    assert poke_reply(manager, 11, "bot") == first


def test_name_reply_uses_nickname():
    assert name_reply("bot", FixedRng(0)) == "bot在此，有何贵干~"
    assert name_reply("bot", FixedRng(1)) == "(っ●ω●)っ在~"
    assert name_reply("bot", FixedRng(3)) == "bot不在呢~"


def test_air_conditioner_default_and_off():
    ac = AirConditioner()
    assert ac.status(1) == "💤\n群温度 26℃"
    assert ac.set_temperature(1, "18") == "💤\n群温度 26℃"


def test_air_conditioner_on_set_off():
    ac = AirConditioner()
    assert ac.turn_on(1) == "❄️哔~"
    assert ac.set_temperature(1, "20") == "❄️风速中\n群温度 20℃"
    assert ac.status(1) == "❄️风速中\n群温度 20℃"
    assert ac.turn_off(1) == "💤哔~"
    assert ac.status(1) == "💤\n群温度 26℃"