"""
Texas Hold'em Game Engine - State Machine Implementation.

This module implements the betting state machine and showdown for one table.
It handles:
- Game setup and per-hand dealing with blinds
- Player actions (fold, check, call, raise, all-in)
- Turn order and betting round completion
- Street progression (preflop, flop, turn, river, showdown)
- Winner resolution and pot award
- Turns for computer-controlled seats

Every operation runs to completion on the engine's single GameState. The
engine is single-writer: callers must not run two operations at once.
Normal play never raises; actions that cannot apply are silently ignored.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple
import functools
import logging
import random

from holdem_engine.config import GameConfig
from holdem_engine.core.card import Card, create_deck, deal_card
from holdem_engine.core.hand import HandRank, evaluate_hand, describe_hand
from holdem_engine.core.player import Player
from holdem_engine.core.rules import (
    GamePhase, ActionType,
    get_blind_positions, get_first_to_act_preflop, personality_for_seat,
    HOLE_CARDS, STREET_PROGRESSION,
)
from holdem_engine.core.state import GameState
from holdem_engine.agents.base import BaseAgent, Decision
from holdem_engine.agents.heuristic_agent import HeuristicAgent
from holdem_engine.schemas import GameStateSchema, snapshot_state


logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


def _notifies(method):
    """Tell subscribers about the state once a public operation finishes."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        result = method(self, *args, **kwargs)
        self._notify()
        return result
    return wrapper


class PokerEngine:
    """
    Texas Hold'em engine owning a single GameState.

    Usage:
        engine = PokerEngine(rng=random.Random(7))
        engine.init_game(player_count=4, starting_chips=1000)
        engine.deal_cards()

        while engine.state.phase != GamePhase.SHOWDOWN:
            if engine.state.current_player_index == 0:
                engine.call()       # Human input from the UI
            else:
                engine.ai_action()

        winner = engine.state.winner
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        agent: Optional[BaseAgent] = None,
    ):
        """
        Create an engine with an empty table.

        Args:
            config: Table settings (defaults to GameConfig())
            rng: Random source for shuffles and the default agent
            agent: Decision maker for computer seats
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.agent = agent or HeuristicAgent(rng=self.rng)
        self.state = GameState(
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
        )
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback run with the state after every public operation.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    def snapshot(self, viewer_id: Optional[int] = None) -> GameStateSchema:
        """Detached, serialisable copy of the state for presentation."""
        return snapshot_state(self.state, viewer_id)

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------

    @_notifies
    def init_game(
        self,
        player_count: Optional[int] = None,
        starting_chips: Optional[int] = None,
    ) -> None:
        """
        Seat a fresh table and replace the state.

        Args:
            player_count: Number of seats (2-10), config default if None
            starting_chips: Stack for every seat, config default if None

        Raises:
            pydantic.ValidationError: If the settings are out of range
        """
        overrides = {}
        if player_count is not None:
            overrides["player_count"] = player_count
        if starting_chips is not None:
            overrides["starting_chips"] = starting_chips
        self.config = GameConfig(**{**self.config.model_dump(), **overrides})

        players = [
            Player(
                id=i,
                name="You" if i == 0 else f"Player {i + 1}",
                chips=self.config.starting_chips,
                is_dealer=i == 0,
                personality=personality_for_seat(i),
            )
            for i in range(self.config.player_count)
        ]

        self.state = GameState(
            players=players,
            deck=create_deck(self.rng),
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
        )
        logger.info(
            f"Game initialised: {self.config.player_count} players, "
            f"{self.config.starting_chips} chips each"
        )

    @_notifies
    def deal_cards(self) -> None:
        """Start a hand: fresh deck, hole cards, blinds, preflop action."""
        self._deal_cards()

    @_notifies
    def new_round(self) -> None:
        """Pass the dealer button one seat left and deal the next hand."""
        state = self.state
        if not state.players:
            logger.warning("Cannot start a new round: game not initialised")
            return
        state.dealer_index = (state.dealer_index + 1) % state.num_players
        self._deal_cards()

    def _deal_cards(self) -> None:
        state = self.state
        if not state.players:
            logger.warning("Cannot deal: game not initialised")
            return

        state.deck = create_deck(self.rng)
        state.community_cards = []
        state.pot = 0
        state.current_bet = state.big_blind
        state.winner = None

        for index, player in enumerate(state.players):
            player.reset_for_new_hand(is_dealer=index == state.dealer_index)

        for _ in range(HOLE_CARDS):
            for player in state.players:
                card = deal_card(state.deck)
                if card is not None:
                    player.hand.append(card)

        self._post_blinds()

        state.current_player_index = get_first_to_act_preflop(state.num_players, state.dealer_index)
        state.players[state.current_player_index].is_current_player = True
        state.phase = GamePhase.PREFLOP

        logger.info(f"Hand dealt, dealer seat {state.dealer_index}")

    def _post_blinds(self) -> None:
        """Post small and big blinds; a short stack posts what it has."""
        state = self.state
        sb_index, bb_index = get_blind_positions(state.num_players, state.dealer_index)

        sb_amount = state.players[sb_index].pay(state.small_blind)
        state.pot += sb_amount

        bb_amount = state.players[bb_index].pay(state.big_blind)
        state.pot += bb_amount

        logger.debug(f"Blinds posted: SB seat {sb_index}={sb_amount} BB seat {bb_index}={bb_amount}")

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    @_notifies
    def fold(self) -> None:
        """Fold the current player's hand."""
        player = self._acting_player("fold")
        if player is None:
            return
        self._fold(player)

    @_notifies
    def call(self) -> None:
        """Match the table bet, or put in every chip if that is less."""
        player = self._acting_player("call")
        if player is None:
            return
        self._call(player)

    @_notifies
    def raise_bet(self, amount: int) -> None:
        """
        Raise the table bet by ``amount``.

        The player must be able to pay for the whole raise. An unaffordable
        raise leaves every chip where it was, but the turn still passes.

        Raises:
            ValueError: If amount is not positive
        """
        if amount <= 0:
            raise ValueError(f"Raise amount must be positive, got {amount}")
        player = self._acting_player("raise_bet")
        if player is None:
            return
        self._raise(player, amount)

    @_notifies
    def check(self) -> None:
        """Pass without betting; ignored while the player still owes chips."""
        player = self._acting_player("check")
        if player is None:
            return
        self._check(player)

    @_notifies
    def all_in(self) -> None:
        """Put the current player's whole stack in."""
        player = self._acting_player("all_in")
        if player is None:
            return
        self._all_in(player)

    @_notifies
    def take_action(self, action_type: ActionType, amount: int = 0) -> None:
        """
        Apply an action for the current player.

        Args:
            action_type: Type of action (FOLD, CHECK, CALL, RAISE, ALL_IN)
            amount: Raise increment for RAISE, ignored otherwise

        Raises:
            ValueError: For an unknown action or a non-positive raise
        """
        if not isinstance(action_type, ActionType):
            raise ValueError(f"Unknown action: {action_type}")
        if action_type == ActionType.RAISE and amount <= 0:
            raise ValueError(f"Raise amount must be positive, got {amount}")

        player = self._acting_player("take_action")
        if player is None:
            return
        self._apply(player, Decision(action_type, amount))

    @_notifies
    def ai_action(self) -> Optional[Decision]:
        """
        Let the agent act for the current seat.

        Does nothing for the human seat, a folded player or when nobody is
        to act.

        Returns:
            The Decision that was applied, or None
        """
        player = self.state.current_player
        if player is None or player.is_human or player.folded:
            return None

        decision = self.agent.act(self.state, player)
        logger.debug(f"{player.name} ({player.personality}) decides {decision}")
        self._apply(player, decision)
        return decision

    def _acting_player(self, action: str) -> Optional[Player]:
        player = self.state.current_player
        if player is None:
            logger.debug(f"{action} ignored: no player to act in phase {self.state.phase.value}")
        return player

    def _apply(self, player: Player, decision: Decision) -> None:
        if decision.action == ActionType.FOLD:
            self._fold(player)
        elif decision.action == ActionType.CHECK:
            self._check(player)
        elif decision.action == ActionType.CALL:
            self._call(player)
        elif decision.action == ActionType.RAISE:
            self._raise(player, decision.amount)
        elif decision.action == ActionType.ALL_IN:
            self._all_in(player)
        else:
            raise ValueError(f"Unknown action: {decision.action}")

    def _fold(self, player: Player) -> None:
        state = self.state
        player.folded = True
        player.is_current_player = False
        logger.debug(f"{player.name} folds")

        remaining = state.active_players
        if len(remaining) == 1:
            self._award_pot(remaining[0])
            state.phase = GamePhase.SHOWDOWN
            return

        self._move_to_next_player()

    def _call(self, player: Player) -> None:
        state = self.state
        paid = player.pay(player.amount_to_call(state.current_bet))
        state.pot += paid
        player.is_current_player = False
        logger.debug(f"{player.name} calls {paid}")
        self._move_to_next_player()

    def _raise(self, player: Player, amount: int) -> None:
        state = self.state
        total_bet = state.current_bet + amount
        to_pay = total_bet - player.bet

        if to_pay <= player.chips:
            player.pay(to_pay)
            state.pot += to_pay
            state.current_bet = total_bet
            logger.debug(f"{player.name} raises to {total_bet}")
        else:
            logger.debug(
                f"{player.name} cannot raise to {total_bet} "
                f"(needs {to_pay}, has {player.chips}); raise ignored"
            )

        player.is_current_player = False
        self._move_to_next_player()

    def _check(self, player: Player) -> None:
        state = self.state
        if player.bet != state.current_bet:
            logger.debug(f"{player.name} cannot check, owes {state.current_bet - player.bet}")
            return
        player.is_current_player = False
        logger.debug(f"{player.name} checks")
        self._move_to_next_player()

    def _all_in(self, player: Player) -> None:
        state = self.state
        paid = player.pay(player.chips)
        state.pot += paid
        if player.bet > state.current_bet:
            state.current_bet = player.bet
        player.is_current_player = False
        logger.debug(f"{player.name} is all-in for {player.bet}")
        self._move_to_next_player()

    # ------------------------------------------------------------------
    # Turn order and streets
    # ------------------------------------------------------------------

    def get_next_active_player(self, from_index: int) -> int:
        """
        Find the next seat after ``from_index`` that has not folded.

        Scans at most once around the table. If every seat has folded the
        last seat looked at is returned.
        """
        players = self.state.players
        num_players = len(players)
        next_index = (from_index + 1) % num_players

        for _ in range(num_players):
            if not players[next_index].folded:
                break
            next_index = (next_index + 1) % num_players

        return next_index

    def _is_betting_round_complete(self) -> bool:
        """Everyone still in has matched the table bet or is all-in."""
        state = self.state
        return all(
            p.bet == state.current_bet or p.chips == 0
            for p in state.active_players
        )

    def _move_to_next_player(self) -> None:
        """
        Pass the turn on, or close the street.

        The street closes when all bets are level and the scan for the next
        seat wraps back to (or behind) the seat that just acted.
        """
        state = self.state
        next_index = self.get_next_active_player(state.current_player_index)

        if self._is_betting_round_complete() and next_index <= state.current_player_index:
            self._next_phase()
            return

        state.current_player_index = next_index
        state.players[next_index].is_current_player = True

    def _next_phase(self) -> None:
        """Reset bets, deal the next street or go to showdown."""
        state = self.state

        for player in state.players:
            player.bet = 0
            player.is_current_player = False
        state.current_bet = 0

        if state.phase not in STREET_PROGRESSION:
            return
        next_phase, cards_to_deal = STREET_PROGRESSION[state.phase]

        if next_phase == GamePhase.SHOWDOWN:
            state.phase = GamePhase.SHOWDOWN
            self._determine_winner()
            return

        self._deal_community(cards_to_deal)
        state.phase = next_phase
        logger.info(
            f"{next_phase.value.capitalize()}: "
            f"{' '.join(str(c) for c in state.community_cards)}"
        )

        state.current_player_index = self.get_next_active_player(state.dealer_index)
        state.players[state.current_player_index].is_current_player = True

    def _deal_community(self, count: int) -> None:
        for _ in range(count):
            card = deal_card(self.state.deck)
            if card is None:
                logger.debug("Deck exhausted, community card skipped")
                return
            self.state.community_cards.append(card)

    # ------------------------------------------------------------------
    # Showdown
    # ------------------------------------------------------------------

    def _determine_winner(self) -> None:
        """
        Decide the winner and hand over the pot.

        Hands are ordered by category, then by the value of their first card.
        Kickers beyond that card are not compared, so remaining ties go to
        the lowest seat.
        """
        state = self.state
        contenders = state.active_players

        if len(contenders) == 1:
            self._award_pot(contenders[0])
            return

        for player in contenders:
            player.hand_rank = evaluate_hand(player.hand, state.community_cards)

        ranked = sorted(
            contenders,
            key=lambda p: _showdown_key(p.hand_rank),
            reverse=True,
        )
        winner = ranked[0]
        self._award_pot(winner)

        if winner.hand_rank is not None:
            logger.info(f"Showdown won with {describe_hand(winner.hand_rank)}")

    def _award_pot(self, winner: Player) -> None:
        """Give the whole pot to ``winner``. The pot figure stays for display."""
        state = self.state
        state.winner = winner
        winner.chips += state.pot
        for player in state.players:
            player.is_current_player = False
        logger.info(f"{winner.name} wins {state.pot}")

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @staticmethod
    def evaluate_hand(hand: List[Card], community_cards: List[Card]) -> HandRank:
        """Evaluate hole cards plus board; see holdem_engine.core.hand."""
        return evaluate_hand(hand, community_cards)


def _showdown_key(hand_rank: Optional[HandRank]) -> Tuple[int, int]:
    if hand_rank is None:
        return (0, 0)
    return (int(hand_rank.rank), hand_rank.top_value)
