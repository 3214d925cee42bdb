# ledremote

Control logic for a single-button lighting remote, the message it
broadcasts, and the LED strip effects that respond to that message.

## Modules

- `ledremote.debouncer`: `Debouncer` and `DebouncerState`. The debouncer
  turns noisy 0/1 readings into a clean output. A new value is accepted only
  after it has held for more than `delay` milliseconds. It can also report
  toggles and presses (`was_toggled`, `debounce_and_toggled`,
  `was_switched_to_state`, `debounce_and_switched_to`,
  `debounce_and_pressed`). The clock can be injected, and it defaults to a
  monotonic millisecond clock.
- `ledremote.message`: `EffectMessage` holds four press counters
  (`count_one` to `count_four`) and packs them as four little-endian floats,
  16 bytes in all. `EffectMessage.unpack()` raises `ValueError` on shorter
  input. The module also provides:
  - `effect_enabled()`, which returns true for an odd, positive counter.
  - `describe_send_status()`, which returns `"Delivery Success :)"` or
    `"Delivery Fail :("`.
- `ledremote.effects`: `Color` is an RGB colour with 0–255 channels.
  `LedStrip` is a fixed-length in-memory strip with these operations:
  - `set_pixel`
  - `fade_to_black`
  - `fill`
  - `clear`
  - indexing and iteration

  The module also holds the effects:
  - `meteor_rain_forward` and `meteor_rain_reverse`, which are generators
    that yield the meteor head position for each frame.
  - `fountain_cycle`, `hallway_cycle` and `mirror_frame`, which choose what
    to show from an `EffectMessage`.
- `ledremote.remote`: `Remote`, the press-counting state machine, and
  `Network`, the protocol it drives. `Remote` methods:
  - `Remote.poll(raw_state)` debounces a reading and calls `press()` on a
    fresh press.
  - `press()` advances the counters, updates the remote's own 8-pixel
    `leds` strip, and broadcasts `message().pack()` once the peer link is
    up.
  - `receive(data)` decodes an incoming message.

## Installation

```
pip install ledremote
```

## Usage

Debouncing a button with a clock you control:

```python
from ledremote.debouncer import Debouncer

now = 0
debouncer = Debouncer(50, False, lambda: now)

debouncer.debounce(1)          # input changed; not stable yet
now = 60
print(debouncer.debounce_and_pressed(1))   # True
```

Encoding and decoding the effect message:

```python
from ledremote.message import EffectMessage, effect_enabled

payload = EffectMessage(1.0, 1.0, 0.0, 0.0).pack()
message = EffectMessage.unpack(payload)
print(effect_enabled(message.count_two))   # True
```

Running effects on a strip:

```python
import random
from ledremote.effects import WHITE, LedStrip, meteor_rain_forward, mirror_frame

strip = LedStrip(106)
mirror_frame(strip, message)             # all white when count_four is odd

for head in meteor_rain_forward(strip, WHITE, 1, 84, True, random.Random(0)):
    pass                                 # render strip.pixels here
```

Driving the remote with your own network object:

```python
from ledremote.remote import Remote

class OfflineNetwork:
    def connect_wifi(self): return False
    def is_wifi_connected(self): return False
    def post(self, url): return False
    def shutdown_wifi(self): pass
    def init_espnow(self): return True
    def add_peer(self, address): return True
    def broadcast(self, address, payload): return True

remote = Remote(OfflineNetwork())
remote.press()    # music on: tries Wi-Fi and the play URL
remote.press()    # music off: tries the stop URL, brings up the peer link
remote.press()    # fountain on, counters broadcast
print(remote.counts, remote.last_send_status)
```

## What this package does not do

The package does no radio, Wi-Fi or HTTP work of its own. `Remote` calls
whatever object you pass as its `Network`, and you have to supply one. The
package also drives no physical LEDs. `LedStrip` only holds colours in
memory, and putting them on hardware is up to the caller. The package
provides no command-line program.

## Running the tests

```
pip install ledremote[test]
pytest
```