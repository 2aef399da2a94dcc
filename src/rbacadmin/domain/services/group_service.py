"""Group service for business logic.

Provides creation, listing, lookup, update and deletion of groups, and the
mapping between group parameters, stored group models and group views.
"""

from collections.abc import Iterable
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from rbacadmin.core.exceptions import (
    EmptyCollectionError,
    NameRequiredError,
    NameTakenError,
    NotFoundByIdError,
    NotFoundByNameError,
)
from rbacadmin.core.logging import get_logger
from rbacadmin.domain.services.resource_service import ResourceService
from rbacadmin.domain.services.result_helper import ResultHelper
from rbacadmin.domain.services.role_service import RoleService
from rbacadmin.domain.services.transformer import Transformer
from rbacadmin.infrastructure.api.schemas.group_schemas import (
    GroupParam,
    GroupVO,
    ResourceSummary,
    RoleSummary,
)
from rbacadmin.infrastructure.api.schemas.result_schemas import (
    ObjectsVO,
    PageRequest,
    PageVO,
)
from rbacadmin.infrastructure.persistence.models import (
    GroupModel,
    ResourceModel,
    RoleModel,
)
from rbacadmin.infrastructure.persistence.repositories import GroupRepository

logger = get_logger(__name__)

GROUP = "group"

CREATE = "Create {} successfully."
INDEX = "Index {} successfully."
SHOW = "Show {} successfully."
UPDATE = "Update {} successfully."


class GroupService:
    """Service for group management business logic.

    Collaborators are passed in explicitly; see ``get_group_service`` in the
    API dependencies for the production wiring.
    """

    def __init__(
        self,
        group_repo: GroupRepository,
        role_service: RoleService,
        resource_service: ResourceService,
        result_helper: ResultHelper | None = None,
        transformer: Transformer | None = None,
    ) -> None:
        """Initialize the group service.

        Args:
            group_repo: Group repository.
            role_service: Resolves role ids.
            resource_service: Resolves resource ids.
            result_helper: Attaches the result envelope to views.
            transformer: Parses id lists and bundles list/page views.
        """
        self.group_repo = group_repo
        self.role_service = role_service
        self.resource_service = resource_service
        self.result_helper = result_helper or ResultHelper()
        self.transformer = transformer or Transformer()

    async def create(self, param: GroupParam) -> GroupVO:
        """Create a new group.

        Args:
            param: Group parameters; ``name`` is required.

        Returns:
            View of the created group.

        Raises:
            NameTakenError: If a group with this name already exists.
            ResourceNotFoundError: If any resource id is unknown.
            RoleNotFoundError: If any role id is unknown.
        """
        self._require_name(param)
        if await self.group_repo.get_by_name(param.name) is not None:
            raise NameTakenError(param.name)

        group = await self._group_param_to_po(param, GroupModel())
        try:
            group = await self.group_repo.create(group)
        except IntegrityError as e:
            # Another request inserted the same name after our check
            raise NameTakenError(param.name) from e

        logger.info("Group created", group_id=group.id, name=group.name)
        return self._group_po_to_vo(group, CREATE.format(GROUP))

    async def list_all(self) -> ObjectsVO:
        """List every group.

        Raises:
            EmptyCollectionError: If there are no groups.
        """
        groups = await self.group_repo.list_all()
        if not groups:
            raise EmptyCollectionError()
        return self._groups_po_to_vo(groups, INDEX.format(GROUP))

    async def list_page(self, page_request: PageRequest) -> PageVO:
        """List one page of groups.

        A page past the end of a non-empty collection is returned with no
        items rather than treated as an error.

        Args:
            page_request: Page number, page size and ordering.

        Returns:
            The page with the total group count.

        Raises:
            EmptyCollectionError: If there are no groups at all.
        """
        groups, total = await self.group_repo.get_page(
            offset=page_request.offset,
            limit=page_request.page_size,
            sort_by=page_request.sort_by,
            sort_order=page_request.sort_order,
        )
        if total == 0:
            raise EmptyCollectionError()
        page = self.transformer.po_page_to_vo(
            self._po_list_to_vo_list(groups),
            page_request,
            total,
            INDEX.format(GROUP),
        )
        return self.result_helper.success_response(page)

    async def get_by_ids(self, ids: Iterable[int]) -> list[GroupModel]:
        """Get the groups matching the given ids.

        Unknown ids are skipped without error and the order of the result is
        not guaranteed.
        """
        return await self.group_repo.get_by_ids(ids)

    async def get_by_id(self, param: GroupParam) -> GroupVO:
        """Get a group by ``param.id``.

        Raises:
            NotFoundByIdError: If no group has this id.
        """
        group = await self._get_existing(param.id)
        return self._group_po_to_vo(group, SHOW.format(GROUP))

    async def get_by_name(self, param: GroupParam) -> GroupVO:
        """Get a group by ``param.name``.

        Raises:
            NotFoundByNameError: If no group has this name.
        """
        group = None
        if param.name:
            group = await self.group_repo.get_by_name(param.name)
        if group is None:
            logger.info("Group not found", name=param.name)
            raise NotFoundByNameError(param.name)
        return self._group_po_to_vo(group, SHOW.format(GROUP))

    async def update(self, param: GroupParam) -> GroupVO:
        """Replace the mapped fields of an existing group.

        Name, description and both association sets are replaced; a blank
        id list clears the corresponding set. The row written is always the
        one identified by ``param.id``.

        Args:
            param: Group parameters; ``id`` and ``name`` are required.

        Returns:
            View of the updated group.

        Raises:
            NotFoundByIdError: If no group has ``param.id``.
            NameTakenError: If the new name belongs to another group.
            ResourceNotFoundError: If any resource id is unknown.
            RoleNotFoundError: If any role id is unknown.
        """
        group = await self._get_existing(param.id)
        self._require_name(param)

        if param.name != group.name:
            other = await self.group_repo.get_by_name(param.name)
            if other is not None and other.id != group.id:
                raise NameTakenError(param.name)

        group = await self._group_param_to_po(param, group)
        group.updated_at = datetime.now(timezone.utc)
        try:
            group = await self.group_repo.update(group)
        except IntegrityError as e:
            raise NameTakenError(param.name) from e

        logger.info("Group updated", group_id=group.id, name=group.name)
        return self._group_po_to_vo(group, UPDATE.format(GROUP))

    async def delete(self, param: GroupParam) -> None:
        """Permanently delete the group identified by ``param.id``.

        Raises:
            NotFoundByIdError: If no group has this id.
        """
        group = await self._get_existing(param.id)
        await self.group_repo.delete(group)
        logger.info("Group deleted", group_id=param.id)

    async def _get_existing(self, group_id: int | None) -> GroupModel:
        group = None
        if group_id is not None:
            group = await self.group_repo.get_by_id(group_id)
        if group is None:
            logger.info("Group not found", group_id=group_id)
            raise NotFoundByIdError(group_id)
        return group

    @staticmethod
    def _require_name(param: GroupParam) -> None:
        if not param.name:
            raise NameRequiredError()

    async def _group_param_to_po(self, param: GroupParam, group: GroupModel) -> GroupModel:
        """Copy group parameters onto a group model.

        Associations are resolved before the model is touched, so a failed
        lookup leaves it unchanged.

        Raises:
            ResourceNotFoundError: If any resource id is unknown.
            RoleNotFoundError: If any role id is unknown.
        """
        resource_ids = self.transformer.ids_str_to_list(param.resource_ids)
        resources: list[ResourceModel] = []
        if resource_ids:
            resources = await self.resource_service.get_resources_by_ids(resource_ids)

        role_ids = self.transformer.ids_str_to_list(param.role_ids)
        roles: list[RoleModel] = []
        if role_ids:
            roles = await self.role_service.get_roles_by_ids(role_ids)

        group.name = param.name
        group.description = param.description
        group.resources = self.transformer.iterable_to_unique_list(resources)
        group.roles = self.transformer.iterable_to_unique_list(roles)
        return group

    def _group_po_to_vo(self, group: GroupModel, message: str | None = None) -> GroupVO:
        """Build the view of a group.

        With a message the view is wrapped as a successful result; without
        one it is a bare list item.
        """
        vo = GroupVO(
            id=group.id,
            name=group.name,
            description=group.description,
            roles=[
                RoleSummary(id=role.id, name=role.name)
                for role in sorted(group.roles, key=lambda r: r.id)
            ],
            resources=[
                ResourceSummary(id=resource.id, name=resource.name, path=resource.path)
                for resource in sorted(group.resources, key=lambda r: r.id)
            ],
            created_at=group.created_at,
            updated_at=group.updated_at,
        )
        if not message:
            return vo
        vo.message = message
        return self.result_helper.success_response(vo)

    def _po_list_to_vo_list(self, groups: Iterable[GroupModel]) -> list[GroupVO]:
        return [self._group_po_to_vo(group) for group in groups]

    def _groups_po_to_vo(self, groups: Iterable[GroupModel], message: str) -> ObjectsVO:
        vos = self.transformer.vo_list_to_objects_vo(self._po_list_to_vo_list(groups), message)
        return self.result_helper.success_response(vos)
