"""Worktree lifecycle: start, finish, cancel and delete.

A feature worktree moves absent -> active (start) -> absent (finish or
cancel). Every operation re-reads the worktree registry from git before
acting, and hard preconditions are checked before the first mutation so a
refused command leaves nothing behind.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitwt.core.context import GitWtContext
from gitwt.core.errors import (
    Aborted,
    BranchAlreadyExists,
    CannotFinishPrimary,
    DirtyWorktree,
    GitWtError,
    WorktreeCreationFailed,
    WorktreeNotFound,
    WorktreeRemovalFailed,
)
from gitwt.core.git.abc import WorktreeInfo
from gitwt.core.github.types import PRState
from gitwt.core.root_locator import ProjectLayout
from gitwt.core.selector import select_worktree
from gitwt.core.shared_paths import LinkResult, link_shared_paths, read_shared_paths
from gitwt.core.worktree_utils import (
    find_current_worktree,
    find_worktree_for_branch,
    is_inside,
    is_primary_worktree,
)

logger = logging.getLogger(__name__)

UNMERGED_COMMITS_SHOWN = 5


@dataclass(frozen=True)
class FinishFlags:
    """Options accepted by finish and delete."""

    create_pr: bool = False
    keep_branch: bool = False
    no_push: bool = False
    force_remove_branch: bool = False
    force: bool = False


@dataclass(frozen=True)
class FinishDecision:
    """What a finish invocation will do, computed before any mutation."""

    should_push: bool
    should_create_pr: bool
    should_remove_worktree: bool
    should_delete_branch: bool
    should_delete_branch_remote: bool


@dataclass(frozen=True)
class StartResult:
    branch: str
    source: str
    worktree_path: Path
    link_results: list[LinkResult]
    navigate_to: Path | None


@dataclass(frozen=True)
class FinishResult:
    branch: str
    worktree_path: Path
    pushed: bool
    branch_deleted: bool
    navigate_to: Path | None


@dataclass(frozen=True)
class CancelResult:
    branch: str
    worktree_path: Path
    branch_deleted: bool
    navigate_to: Path | None


def needs_merge_status(flags: FinishFlags) -> bool:
    """Whether the branch-deletion decision depends on the PR merge state."""
    return not flags.keep_branch and not flags.force_remove_branch


def decide_finish(flags: FinishFlags, *, pr_state: PRState | None) -> FinishDecision:
    """Compute the finish plan from flags and the PR merge state.

    Branch deletion, highest priority first: --keep-branch keeps it,
    --rm deletes it, a MERGED pull request deletes it. Anything else
    (no gh, no PR, open or closed PR) keeps it.

    Args:
        flags: Finish options
        pr_state: State of the branch's pull request, None when unknown

    Examples:
        >>> decide_finish(FinishFlags(), pr_state="MERGED").should_delete_branch
        True
        >>> decide_finish(FinishFlags(keep_branch=True), pr_state="MERGED").should_delete_branch
        False
    """
    if flags.keep_branch:
        delete_branch = False
    elif flags.force_remove_branch:
        delete_branch = True
    else:
        delete_branch = pr_state == "MERGED"

    return FinishDecision(
        should_push=not flags.no_push,
        should_create_pr=flags.create_pr,
        should_remove_worktree=True,
        should_delete_branch=delete_branch,
        should_delete_branch_remote=delete_branch and not flags.no_push,
    )


def start(
    ctx: GitWtContext,
    layout: ProjectLayout,
    branch: str,
    *,
    source: str | None = None,
    custom_path: Path | None = None,
) -> StartResult:
    """Create `branch` in a new worktree and link shared paths into it.

    Args:
        ctx: Application context
        layout: Project layout
        branch: New branch name; must not exist yet
        source: Branch or ref to start from (default: current branch, then
            settings.default_source)
        custom_path: Worktree location, relative to ctx.cwd when not absolute
            (default: <trees>/<branch>)

    Raises:
        BranchAlreadyExists: If branch exists; nothing is created
        WorktreeCreationFailed: If git refuses to create the worktree
    """
    if ctx.git.branch_exists(layout.main_path, branch):
        raise BranchAlreadyExists(branch)

    if source is None:
        source = ctx.git.get_current_branch(ctx.cwd) or ctx.settings.default_source

    if custom_path is not None:
        worktree_path = (ctx.cwd / custom_path).resolve()
    else:
        worktree_path = layout.trees_path / branch

    logger.debug("start: branch=%s source=%s path=%s", branch, source, worktree_path)
    ctx.feedback.info(f"Creating worktree for branch '{branch}' from '{source}'...")

    try:
        ctx.git.add_worktree(layout.main_path, worktree_path, branch=branch, ref=source)
    except RuntimeError as e:
        raise WorktreeCreationFailed(
            f"Failed to create worktree for branch '{branch}'", details=[str(e)]
        ) from e

    ctx.feedback.success(f"✓ Worktree created: {worktree_path}")

    link_results: list[LinkResult] = []
    entries = read_shared_paths(layout.shared_config_path)
    if entries:
        ctx.feedback.info("Creating symlinks for shared paths...")
        link_results = link_shared_paths(layout.main_path, worktree_path, entries)
        for result in link_results:
            if result.ok:
                ctx.feedback.success(f"  ✓ {result.message}")
            else:
                ctx.feedback.warning(f"  Warning: {result.message}")

    return StartResult(
        branch=branch,
        source=source,
        worktree_path=worktree_path,
        link_results=link_results,
        navigate_to=worktree_path,
    )


def _resolve_target(
    ctx: GitWtContext, layout: ProjectLayout, branch: str | None, action: str
) -> tuple[WorktreeInfo, str]:
    worktrees = ctx.git.list_worktrees(layout.main_path)

    if branch is None:
        current = find_current_worktree(worktrees, ctx.cwd)
        if is_inside(ctx.cwd, layout.main_path) or (current is not None and current.is_primary):
            raise CannotFinishPrimary(action)
        branch = ctx.git.get_current_branch(ctx.cwd)
        if branch is None:
            raise WorktreeNotFound(None)

    target = find_worktree_for_branch(worktrees, branch)
    if target is None:
        raise WorktreeNotFound(branch)

    if target.is_primary or is_primary_worktree(target.path, layout.main_path):
        raise CannotFinishPrimary(action)

    return target, branch


def _remove_worktree(
    ctx: GitWtContext, layout: ProjectLayout, worktree_path: Path, *, force: bool
) -> None:
    # Never stand in the directory being removed
    ctx.git.safe_chdir(layout.main_path)

    try:
        ctx.git.remove_worktree(layout.main_path, worktree_path, force=force)
    except RuntimeError as e:
        raise WorktreeRemovalFailed(
            f"Failed to remove worktree: {worktree_path}", details=[str(e)]
        ) from e

    ctx.feedback.success(f"✓ Removed worktree: {worktree_path}")


def _delete_local_branch(
    ctx: GitWtContext, layout: ProjectLayout, branch: str, *, force: bool
) -> bool:
    try:
        ctx.git.delete_branch(layout.main_path, branch, force=force)
    except RuntimeError as e:
        logger.debug("Branch deletion failed: %s", e)
        ctx.feedback.warning(f"Warning: Failed to delete branch '{branch}'")
        return False

    ctx.feedback.success(f"✓ Deleted branch: {branch}")
    return True


def finish(
    ctx: GitWtContext,
    layout: ProjectLayout,
    branch: str | None,
    flags: FinishFlags,
) -> FinishResult:
    """Push, optionally open a PR, remove the worktree and maybe delete the branch.

    Raises:
        CannotFinishPrimary: If asked to finish the primary worktree
        WorktreeNotFound: If no worktree has the branch checked out
        DirtyWorktree: If the worktree has uncommitted changes and not flags.force
        Aborted: If the user declines to continue after a soft failure
        WorktreeRemovalFailed: If git refuses to remove the worktree
    """
    target, branch = _resolve_target(ctx, layout, branch, "finish")

    dirty = ctx.git.has_uncommitted_changes(target.path)
    if dirty and not flags.force:
        raise DirtyWorktree(target.path, ctx.git.get_status_lines(target.path))
    if dirty:
        ctx.feedback.warning("Warning: Worktree has uncommitted changes (forcing removal)")
        for line in ctx.git.get_status_lines(target.path):
            ctx.feedback.info(f"  {line}")

    pr_state: PRState | None = None
    if needs_merge_status(flags) and ctx.github.is_available():
        pr_state = ctx.github.get_pr_status(layout.main_path, branch).state

    decision = decide_finish(flags, pr_state=pr_state)
    logger.debug("finish %s: dirty=%s pr_state=%s decision=%s", branch, dirty, pr_state, decision)

    ctx.feedback.info(f"Finishing worktree for branch '{branch}'...")

    pushed = False
    if decision.should_push:
        ctx.feedback.info(f"Pushing branch to {ctx.settings.remote}...")
        pushed = ctx.git.push_branch(target.path, ctx.settings.remote, branch)
        if pushed:
            ctx.feedback.success("✓ Branch pushed")
        else:
            ctx.feedback.warning("Warning: Failed to push branch")
            if not ctx.prompter.confirm("Continue anyway?"):
                raise Aborted()

    if decision.should_create_pr:
        if ctx.github.is_available():
            ctx.feedback.info("Creating pull request...")
            if not ctx.github.create_pr(target.path):
                ctx.feedback.warning("Warning: Failed to create PR")
                if not ctx.prompter.confirm("Continue with cleanup?"):
                    raise Aborted()
        else:
            ctx.feedback.warning("Warning: gh CLI not found, skipping PR creation")

    navigate_to = layout.main_path if is_inside(ctx.cwd, target.path) else None

    # --force only when it was needed to override a dirty tree
    _remove_worktree(ctx, layout, target.path, force=flags.force and dirty)

    branch_deleted = False
    if decision.should_delete_branch:
        # -D: squash merges on the server leave the branch unmerged locally
        branch_deleted = _delete_local_branch(ctx, layout, branch, force=True)
        if branch_deleted and decision.should_delete_branch_remote:
            removed = ctx.git.delete_remote_branch(layout.main_path, ctx.settings.remote, branch)
            logger.debug("Remote branch %s/%s deleted: %s", ctx.settings.remote, branch, removed)
    elif flags.keep_branch:
        ctx.feedback.info(f"Branch kept: {branch}")
    else:
        ctx.feedback.info(f"Branch kept: {branch} (no merged PR found, use --rm to delete)")

    return FinishResult(
        branch=branch,
        worktree_path=target.path,
        pushed=pushed,
        branch_deleted=branch_deleted,
        navigate_to=navigate_to,
    )


def cancel(
    ctx: GitWtContext,
    layout: ProjectLayout,
    branch: str | None,
    *,
    delete_branch: bool = False,
) -> CancelResult:
    """Discard a worktree without pushing.

    Uncommitted changes only trigger a confirmation. The branch is deleted
    on request: directly when merged into trunk, otherwise after a second
    confirmation.

    Raises:
        CannotFinishPrimary: If asked to cancel the primary worktree
        WorktreeNotFound: If no worktree has the branch checked out
        Aborted: If the user declines removal of a dirty worktree
        WorktreeRemovalFailed: If git refuses to remove the worktree
    """
    target, branch = _resolve_target(ctx, layout, branch, "cancel")

    ctx.feedback.info(f"Canceling worktree for branch '{branch}'...")

    if ctx.git.has_uncommitted_changes(target.path):
        ctx.feedback.warning("Warning: Worktree has uncommitted changes")
        for line in ctx.git.get_status_lines(target.path):
            ctx.feedback.info(f"  {line}")
        if not ctx.prompter.confirm("Continue with removal?"):
            raise Aborted()

    navigate_to = layout.main_path if is_inside(ctx.cwd, target.path) else None
    _remove_worktree(ctx, layout, target.path, force=True)

    branch_deleted = False
    if delete_branch:
        trunk = ctx.settings.trunk_branch or ctx.git.get_trunk_branch(layout.main_path)
        if ctx.git.is_branch_merged(layout.main_path, branch, trunk):
            branch_deleted = _delete_local_branch(ctx, layout, branch, force=False)
        else:
            ctx.feedback.warning(f"Warning: Branch '{branch}' has unmerged changes")
            commits = ctx.git.list_unmerged_commits(
                layout.main_path, branch, trunk, limit=UNMERGED_COMMITS_SHOWN
            )
            for commit in commits:
                ctx.feedback.info(f"  {commit}")
            if ctx.prompter.confirm("Force delete anyway?"):
                branch_deleted = _delete_local_branch(ctx, layout, branch, force=True)
            else:
                ctx.feedback.info(f"Branch kept: {branch}")

    return CancelResult(
        branch=branch,
        worktree_path=target.path,
        branch_deleted=branch_deleted,
        navigate_to=navigate_to,
    )


def delete(
    ctx: GitWtContext,
    layout: ProjectLayout,
    filter_text: str | None,
    flags: FinishFlags,
) -> FinishResult:
    """Select a feature worktree and finish it."""
    selected = select_worktree(
        ctx.git.list_worktrees(layout.main_path),
        main_path=layout.main_path,
        filter_text=filter_text,
        prompter=ctx.prompter,
    )
    if selected.branch is None:
        raise GitWtError(
            f"Worktree has no branch checked out: {selected.path}",
            details=[f"Remove it with 'git worktree remove {selected.path}'"],
        )
    return finish(ctx, layout, selected.branch, flags)
