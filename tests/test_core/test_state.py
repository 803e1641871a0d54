"""
Tests for the table state, player records, snapshots and subscriptions.
"""

from holdem_engine.core.game import PokerEngine
from holdem_engine.core.player import Player
from holdem_engine.core.rules import GamePhase, Personality
from holdem_engine.core.state import GameState
from holdem_engine.schemas import GameStateSchema

from helpers import advance_to


class TestPlayer:
    """Tests for the Player record."""

    def test_pay(self, sample_player):
        assert sample_player.pay(100) == 100
        assert sample_player.chips == 900
        assert sample_player.bet == 100

    def test_pay_capped_at_stack(self, sample_player):
        sample_player.chips = 30
        assert sample_player.pay(100) == 30
        assert sample_player.chips == 0
        assert sample_player.bet == 30
        assert sample_player.is_all_in

    def test_pay_nothing(self, sample_player):
        assert sample_player.pay(0) == 0
        assert sample_player.pay(-5) == 0
        assert sample_player.chips == 1000

    def test_amount_to_call(self, sample_player):
        sample_player.bet = 20
        assert sample_player.amount_to_call(60) == 40
        assert sample_player.amount_to_call(10) == 0

    def test_folded_player_is_not_all_in(self, sample_player):
        sample_player.chips = 0
        sample_player.folded = True
        assert not sample_player.is_all_in

    def test_reset_for_new_hand(self, sample_player, cards):
        sample_player.hand = cards("As Kd")
        sample_player.bet = 50
        sample_player.folded = True
        sample_player.is_current_player = True
        sample_player.reset_for_new_hand(is_dealer=True)
        assert sample_player.hand == []
        assert sample_player.bet == 0
        assert not sample_player.folded
        assert not sample_player.is_current_player
        assert sample_player.is_dealer
        assert sample_player.chips == 1000

    def test_is_human(self):
        assert Player(id=0, name="You", chips=10).is_human
        assert not Player(id=2, name="Player 3", chips=10, personality=Personality.LOOSE).is_human


class TestGameState:
    """Tests for derived state properties."""

    def test_empty_state(self):
        state = GameState()
        assert state.num_players == 0
        assert state.current_player is None
        assert not state.is_hand_running
        assert state.total_chips == 0

    def test_current_player(self, four_player_game):
        state = four_player_game.state
        assert state.is_hand_running
        assert state.current_player is state.players[3]

    def test_active_players(self, four_player_game):
        state = four_player_game.state
        state.players[1].folded = True
        assert [p.id for p in state.active_players] == [0, 2, 3]

    def test_total_chips_constant_during_hand(self, four_player_game):
        state = four_player_game.state
        assert state.total_chips == 4000
        four_player_game.raise_bet(80)
        four_player_game.call()
        assert state.total_chips == 4000

    def test_total_chips_after_award(self, four_player_game):
        """The awarded pot stays on display until the next deal."""
        state = four_player_game.state
        for _ in range(3):
            four_player_game.fold()
        assert sum(p.chips for p in state.players) == 4000
        assert state.total_chips == 4000 + state.pot
        four_player_game.new_round()
        assert state.total_chips == 4000


class TestSubscribe:
    """Tests for state change notifications."""

    def test_listener_called_after_operations(self, engine):
        seen = []
        engine.subscribe(lambda state: seen.append(state.phase))
        engine.init_game(player_count=4)
        engine.deal_cards()
        engine.call()
        assert seen == [GamePhase.WAITING, GamePhase.PREFLOP, GamePhase.PREFLOP]

    def test_listener_receives_live_state(self, engine):
        received = []
        engine.subscribe(received.append)
        engine.init_game(player_count=2)
        assert received[-1] is engine.state

    def test_unsubscribe(self, four_player_game):
        calls = []
        unsubscribe = four_player_game.subscribe(lambda state: calls.append(1))
        four_player_game.call()
        unsubscribe()
        four_player_game.call()
        assert calls == [1]
        # Removing twice is harmless
        unsubscribe()

    def test_multiple_listeners(self, four_player_game):
        first, second = [], []
        four_player_game.subscribe(lambda state: first.append(1))
        four_player_game.subscribe(lambda state: second.append(1))
        four_player_game.fold()
        assert first == second == [1]

    def test_rejected_operation_does_not_notify(self, four_player_game):
        calls = []
        four_player_game.subscribe(lambda state: calls.append(1))
        try:
            four_player_game.raise_bet(0)
        except ValueError:
            pass
        assert calls == []

    def test_ai_turn_notifies(self, four_player_game):
        calls = []
        four_player_game.subscribe(lambda state: calls.append(1))
        four_player_game.ai_action()
        assert calls == [1]


class TestSnapshot:
    """Tests for presentation snapshots."""

    def test_snapshot_fields(self, four_player_game):
        snap = four_player_game.snapshot()
        assert isinstance(snap, GameStateSchema)
        assert snap.phase == "preflop"
        assert snap.pot == 30
        assert snap.current_bet == 20
        assert snap.current_player_index == 3
        assert snap.dealer_index == 0
        assert snap.winner_id is None
        assert snap.cards_remaining == 44
        assert snap.small_blind == 10
        assert snap.big_blind == 20
        assert [p.name for p in snap.players] == ["You", "Player 2", "Player 3", "Player 4"]
        assert snap.players[0].personality is None
        assert snap.players[1].personality == "loose"

    def test_hole_cards_hidden_without_viewer(self, four_player_game):
        snap = four_player_game.snapshot()
        assert all(p.hand is None for p in snap.players)

    def test_viewer_sees_own_cards_only(self, four_player_game):
        snap = four_player_game.snapshot(viewer_id=0)
        assert len(snap.players[0].hand) == 2
        assert all(p.hand is None for p in snap.players[1:])

    def test_card_fields(self, four_player_game):
        state = four_player_game.state
        snap = four_player_game.snapshot(viewer_id=0)
        card = state.players[0].hand[0]
        shown = snap.players[0].hand[0]
        assert shown.rank == card.rank
        assert shown.suit == card.suit.value
        assert shown.value == card.value
        assert shown.text == str(card)
        assert shown.color in ("red", "black")

    def test_showdown_reveals_remaining_hands(self, river_game):
        state = river_game.state
        state.players[0].folded = True
        state.current_player_index = 1
        advance_to(river_game, GamePhase.SHOWDOWN)
        snap = river_game.snapshot()
        assert snap.players[0].hand is None
        assert all(len(p.hand) == 2 for p in snap.players[1:])
        assert snap.winner_id == state.winner.id
        assert snap.current_player_index is None
        assert snap.players[1].hand_rank is not None

    def test_win_by_folds_keeps_cards_hidden(self, four_player_game):
        for _ in range(3):
            four_player_game.fold()
        snap = four_player_game.snapshot()
        assert snap.winner_id == 2
        assert all(p.hand is None for p in snap.players)

    def test_snapshot_is_detached(self, four_player_game):
        snap = four_player_game.snapshot(viewer_id=0)
        snap.pot = 0
        snap.players[0].chips = 0
        assert four_player_game.state.pot == 30
        assert four_player_game.state.players[0].chips == 1000

    def test_snapshot_serialises(self, four_player_game):
        data = four_player_game.snapshot(viewer_id=0).model_dump()
        assert data["phase"] == "preflop"
        assert len(data["players"]) == 4
        assert GameStateSchema.model_validate(data).pot == 30

    def test_waiting_snapshot(self):
        engine = PokerEngine()
        engine.init_game(player_count=3)
        snap = engine.snapshot(viewer_id=0)
        assert snap.phase == "waiting"
        assert snap.current_player_index is None
        assert snap.players[0].hand == []
