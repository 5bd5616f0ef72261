# zbplugins

The logic behind a set of chat-bot commands for group and private chats:
parsing of command text, per-chat state, small SQLite stores, lookups
against web services, and the reply text each command sends. Wire the
functions into whatever bot framework you run.

## Modules

| Module | What it does |
| --- | --- |
| `logformat` | Coloured `[LEVEL] message` log formatter (`LogFormat`, `level_color`) |
| `ai_false` | System status report (`status_text`, `cpu_percent`, `mem_percent`, `disk_report`) and the packed default rate-limit setting (`parse_limit_command`, `pack_limit`, `unpack_limit`) |
| `aireply` | Per-chat reply mode and voice mode selection (`ModeStore`, `TTSModes`, `get_reply_mode`, `set_reply_mode`, `conversation_id`) |
| `links` | Random waifu picture URL (`waifu_url`) and a "search it for me" link (`baidu_url`) |
| `chat` | Name and poke replies, token-bucket rate limiting (`RateLimiter`, `RateManager`), a per-group air conditioner (`AirConditioner`) |
| `choose` | Picks one of several options separated by 还是 (`choose`) |
| `cangtoushi` | Acrostic poem lookup (`CangtoushiClient`, `parse_csrf`, `deal_html`) |
| `bilibili_parse` | Video link and ID parsing, statistics fetching and formatting (`parse`, `format_video`, `row`, `cut_url`, `real_url`) |
| `driftbottle` | Drift bottles thrown into and picked from SQLite channels (`Sea`, `Bottle`, `new_bottle`, `parse_throw`, `parse_pick`) |
| `chouxianghua` | Turns text into emoji by pronunciation (`PinyinDatabase`, `translate`) |
| `epidemic` | City statistics lookup and formatting (`Area`, `query`, `find_city`, `format_area`) |
| `diana` | Short-essay store and text-similarity check report (`TextDatabase`, `check`, `report`, `is_check_request`) |
| `emojimix` | Combines two emoji into one picture URL (`match`, `mix_urls`, `mix`) |
| `github` | Repository search and text summary (`parse_command`, `search_repo`, `format_repo`, `preview_url`) |

Functions that reach a web service take an optional `session`; pass a
`requests.Session` or any object with the same `get`/`post`/`head`
methods, otherwise `requests` is used directly.

## Examples

Choosing between options:

```python
import random
from zbplugins.choose import choose

print(choose("可口可乐还是百事可乐", "Alice", random.Random(1)))
```

Rate limiting pokes per group:

```python
from zbplugins.chat import RateManager, poke_reply

manager = RateManager(300, 8)
print(poke_reply(manager, 123456, "sheriru"))
```

Drift bottles:

```python
from zbplugins.driftbottle import Sea, new_bottle

with Sea("sea.db") as sea:
    sea.create_channel("global")
    sea.throw(new_bottle(10001, 0, "Alice", "hello"), "global")
    bottle = sea.fetch("global", 123456)
    print(bottle.name, bottle.msg)
    sea.destroy(bottle, "global")
```

Formatting numbers the way video statistics are shown:

```python
from zbplugins.bilibili_parse import row

print(row(123456))   # 12.35万
print(row(999))      # 999
```

## What the package does not do

- It installs no command and does not connect to a chat server; there is
  no bot configuration, no command-line options and no start-up banner.
  You supply the framework that receives messages and sends replies.
- It has no time-of-day greeting replies and no book review, story, curse
  or joke stores; only the stores listed above are included.
- State kept by `ModeStore`, `AirConditioner` and `TTSModes` lives in
  memory and is lost when the process ends.

## Tests

The test suite uses pytest; install the `test` extra and run pytest from
the project directory.