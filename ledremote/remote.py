"""The push-button remote that steps through the effects and broadcasts their state."""

from __future__ import annotations

from typing import Protocol

from ledremote.debouncer import Debouncer
from ledremote.effects import BLACK, BLUE, GREEN, ORANGE_RED, RED, WHITE, LedStrip
from ledremote.message import EffectMessage, describe_send_status

REMOTE_LEDS = 8
DEBOUNCE_MS = 50
BROADCAST_ADDRESS = bytes([0xFF] * 6)
PLAY_URL = "http://localhost:5000/play"
STOP_URL = "http://localhost:5000/stop"


class Network(Protocol):
    """The radio links the remote uses: Wi-Fi with HTTP, and peer broadcast."""

    def connect_wifi(self) -> bool:
        """Join the Wi-Fi network, retrying for a while; report success."""

    def is_wifi_connected(self) -> bool:
        """Whether Wi-Fi is currently connected."""

    def post(self, url: str) -> bool:
        """Send an empty POST; report whether a response came back."""

    def shutdown_wifi(self) -> None:
        """Disconnect Wi-Fi and put the radio back into station mode."""

    def init_espnow(self) -> bool:
        """Start the peer-to-peer link; report success."""

    def add_peer(self, address: bytes) -> bool:
        """Register a peer address; report success."""

    def broadcast(self, address: bytes, payload: bytes) -> bool:
        """Send a payload to a peer; report delivery."""


class Remote:
    """A one-button remote cycling music, fountain, hallway and mirror effects.

    Each effect has a press counter: 1 means switched on, 2 switched off.
    The first press starts music playback over HTTP, the second stops it and
    brings up the peer link used to broadcast the counters afterwards.
    """

    def __init__(self, network: Network, debouncer: Debouncer | None = None) -> None:
        self._network = network
        self._debouncer = debouncer if debouncer is not None else Debouncer(DEBOUNCE_MS)
        self.leds = LedStrip(REMOTE_LEDS)
        self._counts = [0, 0, 0, 0]
        self.espnow_ready = False
        self.last_send_status: str | None = None
        self.incoming: EffectMessage | None = None
        self.play_url = PLAY_URL
        self.stop_url = STOP_URL

    @property
    def counts(self) -> tuple[int, int, int, int]:
        """The four press counters: music, fountain, hallway, mirror."""
        one, two, three, four = self._counts
        return one, two, three, four

    def message(self) -> EffectMessage:
        """The counters as the message sent to the light nodes."""
        return EffectMessage(*(float(count) for count in self._counts))

    def poll(self, raw_state: int) -> bool:
        """Feed one raw button reading; handle and report a fresh press."""
        pressed = self._debouncer.debounce_and_pressed(raw_state)
        if pressed:
            self.press()
        return pressed

    def receive(self, data: bytes) -> EffectMessage:
        """Record a message received from a peer."""
        self.incoming = EffectMessage.unpack(data)
        return self.incoming

    def press(self) -> EffectMessage:
        """Advance to the next effect state and broadcast the counters."""
        counts = self._counts
        if counts[0] < 2:
            self._advance_music()
        elif counts[1] < 2:
            counts[1] += 1
            self._show_step(1, counts[1])
        elif counts[2] < 2:
            counts[2] += 1
            counts[3] = 1
            self._show_step(2, counts[2])
        elif counts[3] < 2:
            counts[3] += 1
            self._show_step(3, counts[3])
        else:
            self._counts = [0, 0, 0, 0]
            self.leds[3] = BLACK

        message = self.message()
        if self.espnow_ready:
            delivered = self._network.broadcast(BROADCAST_ADDRESS, message.pack())
            self.last_send_status = describe_send_status(delivered)
        return message

    def _show_step(self, led: int, count: int) -> None:
        self.leds[led - 1] = BLACK
        self.leds[led] = ORANGE_RED if count == 2 else WHITE

    def _advance_music(self) -> None:
        self._counts[0] += 1
        if self._counts[0] == 1:
            self.leds[0] = WHITE
            if self._network.connect_wifi():
                self._post(self.play_url)
        if self._counts[0] == 2:
            if self._network.is_wifi_connected():
                self._post(self.stop_url)
            self._network.shutdown_wifi()
            self._start_espnow()

    def _post(self, url: str) -> None:
        self.leds[0] = GREEN if self._network.post(url) else RED

    def _start_espnow(self) -> None:
        if not self._network.init_espnow():
            self.espnow_ready = False
            return
        self.espnow_ready = True
        self.leds[0] = BLUE
        self._counts[0] += 1
        self.espnow_ready = self._network.add_peer(BROADCAST_ADDRESS)