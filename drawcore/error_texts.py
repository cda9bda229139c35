"""Table of error code names and their message texts, in code order."""

_ERRORS: tuple[tuple[str, str], ...] = (
    ("eOk", "No error"),
    ("eInvalidDrawing", "Invalid Drawing"),
    ("eNotImplementedYet", "Not implemented yet"),
    ("eNotApplicable", "Not Applicable"),
    ("eInvalidInput", "Invalid input"),
    ("eAmbiguousInput", "Ambiguous input"),
    ("eAmbiguousOutput", "Ambiguous output"),
    ("eOutOfMemory", "Out of memory"),
    ("eNoInterface", "No Interface"),
    ("eBufferTooSmall", "Buffer is too small"),
    ("eInvalidOpenState", "Invalid open state"),
    ("eUnsupportedMethod", "Unsupported method"),
    ("eEntityInInactiveLayout", "Entity is in inactive Layout"),
    ("eDuplicateHandle", "Handle already exists"),
    ("eNullHandle", "Null handle"),
    ("eBrokenHandle", "Broken handle"),
    ("eUnknownHandle", "Unknown handle"),
    ("eHandleInUse", "Handle in use"),
    ("eNullObjectPointer", "Null object pointer"),
    ("eNullObjectId", "Null object Id"),
    ("eNullBlockName", "Null Block name"),
    ("eContainerNotEmpty", "Container is not empty"),
    ("eNullEntityPointer", "Null entity pointer"),
    ("eIllegalEntityType", "Illegal entity type"),
    ("eKeyNotFound", "Key not found"),
    ("eDuplicateKey", "Duplicate key"),
    ("eInvalidIndex", "Invalid index"),
    ("eCharacterNotFound", "Character not found"),
    ("eDuplicateIndex", "Duplicate index"),
    ("eAlreadyInDb", "Already in Database"),
    ("eOutOfDisk", "Out of disk"),
    ("eDeletedEntry", "Deleted entry"),
    ("eNegativeValueNotAllowed", "Negative value not allowed"),
    ("eInvalidExtents", "Invalid extents"),
    ("eInvalidAdsName", "Invalid ads name"),
    ("eInvalidSymbolTableName", "Invalid Symbol Table name"),
    ("eInvalidKey", "Invalid key"),
    ("eWrongObjectType", "Wrong object type"),
    ("eWrongDatabase", "Wrong Database"),
    ("eObjectToBeDeleted", "Object to be deleted"),
    ("eInvalidFileVersion", "Invalid file version"),
    ("eAnonymousEntry", "Anonymous entry"),
    ("eIllegalReplacement", "Illegal replacement"),
    ("eEndOfObject", "End of oject"),
    ("eEndOfFile", "Unexpected end of file"),
    ("eFileExists", "File exists"),
    ("eCantOpenFile", "Can't open file"),
    ("eFileCloseError", "File close error"),
    ("eFileWriteError", "File write error"),
    ("eNoFileName", "No filename"),
    ("eFilerError", "Filer error"),
    ("eFileAccessErr", "File access error"),
    ("eFileSystemErr", "File system error"),
    ("eFileInternalErr", "File internal error"),
    ("eFileTooManyOpen", "Too many open files"),
    ("eFileNotFound", "File not found"),
    ("eUnknownFileType", "Unknown file type"),
    ("eIsReading", "Is reading"),
    ("eIsWriting", "Is writing"),
    ("eNotOpenForRead", "Not opened for read"),
    ("eNotOpenForWrite", "Not opened for write"),
    ("eNotThatKindOfClass", "Not that kind of class"),
    ("eInvalidBlockName", "Invalid Block name"),
    ("eMissingDxfField", "Missing dxf field"),
    ("eDuplicateDxfField", "Duplicate dxf field"),
    ("eInvalidGroupCode", "Invalid group code"),
    ("eInvalidResBuf", "Invalid ResBuf"),
    ("eBadDxfSequence", "Bad Dxf sequence"),
    ("eInvalidRoundTripR14Data", "Invalid RoundTripR14 data"),
    ("eVertexAfterFace", "Polyface Mesh vertex after face"),
    ("eInvalidVertexIndex", "Invalid vertex index"),
    ("eOtherObjectsBusy", "Other objects busy"),
    ("eMustFirstAddBlockToDb", "The invoked BlockTableRecord is not database-resident yet"),
    ("eCannotNestBlockDefs", "Cannot nest Block definitions"),
    ("eDwgRecoveredOK", ".dwg file recovered OK"),
    ("eDwgNotRecoverable", ".dwg file is not recoverable"),
    ("eDxfPartiallyRead", ".dxf file partially read"),
    ("eDxfReadAborted", ".dxf file read aborted"),
    ("eDxbPartiallyRead", ".dxb file partially read"),
    ("eDwgCRCError", "CRC does not match"),
    ("eDwgSentinelDoesNotMatch", "Sentinel does not match"),
    ("eDwgObjectImproperlyRead", "Object improperly read"),
    ("eNoInputFiler", "No input filer"),
    ("eDwgNeedsAFullSave", "Drawing needs a full save"),
    ("eDxbReadAborted", ".dxb file read aborted"),
    ("eDwkLockFileFound", "Dwk lock file found"),
    ("eWasErased", "Object was erased"),
    ("ePermanentlyErased", "Object was permanently erased"),
    ("eWasOpenForRead", "Was open for read"),
    ("eWasOpenForWrite", "Was open for write"),
    ("eWasOpenForUndo", "Was open for undo"),
    ("eWasNotifying", "Was notifying"),
    ("eWasOpenForNotify", "Was open for notify"),
    ("eOnLockedLayer", "On locked Layer"),
    ("eMustOpenThruOwner", "Must open thru owner"),
    ("eSubentitiesStillOpen", "Subentities still open"),
    ("eAtMaxReaders", "At max readers"),
    ("eIsWriteProtected", "Is write protected"),
    ("eIsXRefObject", "Is XRef object"),
    ("eNotAnEntity", "An object in entitiesToMove is not an entity"),
    ("eHadMultipleReaders", "Had multiple readers"),
    ("eInvalidBlkRecordName", "Invalid Symbol table record name"),
    ("eDuplicateRecordName", "Duplicate Record name"),
    ("eNotXrefBlock", "Symbol is not a Reference definition"),
    ("eEmptyRecordName", "Empty Record name"),
    ("eXRefDependent", "Symbol depend on other References"),
    ("eSelfReference", "Entity references itself"),
    ("eMissingSymbolTable", "Missing Symbol Table"),
    ("eMissingSymbolTableRec", "Missing Symbol Table record"),
    ("eWasNotOpenForWrite", "Was not open for write"),
    ("eCloseWasNotifying", "Close was notifying"),
    ("eCloseModifyAborted", "Close modify aborted"),
    ("eClosePartialFailure", "Close partial failure"),
    ("eCloseFailObjectDamaged", "Close fail object damaged"),
    ("eCannotBeErasedByCaller", "Object can't be erased"),
    ("eCannotBeResurrected", "Cannot be resurrected"),
    ("eInsertAfter", "Insert after"),
    ("eFixedAllErrors", "Fixed all errors"),
    ("eLeftErrorsUnfixed", "Left errors unfixed"),
    ("eUnrecoverableErrors", "Unrecoverable errors"),
    ("eNoDatabase", "No Database"),
    ("eXdataSizeExceeded", "XData size exceeded"),
    (
        "eCannotSaveHatchRoundtrip",
        "Cannot save Hatch roundtrip data due to format limitations (they are too large)",
    ),
    (
        "eHatchHasInconsistentPatParams",
        "Hatch is gradient, but either solid fill flag not set or pattern type is not pre-defined",
    ),
    ("eRegappIdNotFound", "Invalid RegApp"),
    ("eRepeatEntity", "Repeat entity"),
    ("eRecordNotInTable", "Record not in Table"),
    ("eIteratorDone", "Iterator done"),
    ("eNullIterator", "Null iterator"),
    ("eNotInBlock", "Not in symbol"),
    ("eOwnerNotInDatabase", "Owner not in Database"),
    ("eOwnerNotOpenForRead", "Owner not open for read"),
    ("eOwnerNotOpenForWrite", "Owner not open for write"),
    ("eExplodeBeforeTransform", "Explode before transform"),
    ("eCannotScaleNonOrtho", "Cannot transform by non-ortho matrix"),
    ("eCannotScaleNonUniformly", "Cannot transform by non-uniform scaling matrix"),
    ("eNotInDatabase", "Object not in Database"),
    ("eNotCurrentDatabase", "Not current Database"),
    ("eIsAnEntity", "Is an entity"),
    ("eCannotChangeActiveViewport", "Cannot change properties of active Viewport!"),
    ("eNotInPaperspace", "No active Viewport in Paper Space"),
    ("eCommandWasInProgress", "Command was in progress"),
    ("eGeneralModelingFailure", "General modeling failure"),
    ("eOutOfRange", "Out of range"),
    ("eNonCoplanarGeometry", "Non coplanar geometry"),
    ("eDegenerateGeometry", "Degenerate geometry"),
    ("eInvalidAxis", "Invalid axis"),
    ("ePointNotOnEntity", "Point not on entity"),
    ("eSingularPoint", "Singular point"),
    ("eInvalidOffset", "Invalid offset"),
    ("eNonPlanarEntity", "Non planar entity"),
    ("eCannotExplodeEntity", "Can not explode entity"),
    ("eStringTooLong", "String too long"),
    ("eInvalidSymTableFlag", "Invalid Symbol Table flag"),
    ("eUndefinedLineType", "Undefined LineStyle"),
    ("eInvalidTextStyle", "TextStyle is invalid"),
    ("eTooFewLineTypeElements", "Too few LineType elements"),
    ("eTooManyLineTypeElements", "Too many LineType elements"),
    ("eExcessiveItemCount", "Excessive item count"),
    ("eIgnoredLinetypeRedef", "Ignored LineType redefinition"),
    ("eBadUCS", "Bad UCS"),
    ("eBadPaperspaceView", "Bad Paper Space View"),
    ("eSomeInputDataLeftUnread", "Some input data left unread"),
    ("eNoInternalSpace", "No internal space"),
    ("eInvalidDimStyle", "Invalid DimensionStyle"),
    ("eInvalidLayer", "Invalid Layer"),
    ("eInvalidMlineStyle", "RlineStyle is invalid"),
    ("eDwgNeedsRecovery", ".dwg file needs recovery"),
    ("eRecoveryFailed", "Recovery failed"),
    ("eDeleteEntity", "Delete entity"),
    ("eInvalidFix", "Invalid fix"),
    ("eBadLayerName", "Bad Layer name"),
    ("eLayerGroupCodeMissing", "Layer group code missing"),
    ("eBadColor", "Bad color"),
    ("eBadColorIndex", "Bad color index"),
    ("eBadLinetypeName", "Bad LineType name"),
    ("eBadLinetypeScale", "Bad LineType scale"),
    ("eBadVisibilityValue", "Bad visibility value"),
    ("eProperClassSeparatorExpected", "Proper class separator expected"),
    ("eBadLineWeightValue", "Bad lineweight value"),
    ("ePagerError", "Pager error"),
    ("eOutOfPagerMemory", "Out of pager memory"),
    ("ePagerWriteError", "Pager write error"),
    ("eWasNotForwarding", "Was not forwarding"),
    ("eInvalidIdMap", "Invalid Id map"),
    ("eInvalidOwnerObject", "Invalid owner Object"),
    ("eOwnerNotSet", "Owner not set"),
    ("eWrongSubentityType", "Wrong subentity type"),
    ("eTooManyVertices", "Too many vertices"),
    ("eTooFewVertices", "Too few vertices"),
    ("eNoActiveTransactions", "No active transactions"),
    ("eTransactionIsActive", "Transaction is active"),
    ("eNotTopTransaction", "Not top transaction"),
    ("eTransactionOpenWhileCommandEnded", "Transaction open while command ended"),
    ("eInProcessOfCommitting", "In process of committing"),
    ("eNotNewlyCreated", "Not newly created object"),
    ("eLongTransReferenceError", "Entity is excluded from long transaction"),
    ("eNoWorkSet", "No work set"),
    ("eAlreadyInGroup", "Entity already in group"),
    ("eNotInGroup", "There is no entity with this Id in group"),
    ("eBadDwgFile", "Bad .dwg file"),
    ("eInvalidREFIID", "Invalid REFIID"),
    ("eInvalidNormal", "Invalid normal"),
    ("eInvalidStyle", "Invalid Style"),
    ("eCannotRestoreFromAcisFile", "Cannot restore from Acis file"),
    ("eEmptyAcisFile", "Empty ACIS not allowed"),
    ("eNLSFileNotAvailable", "NLS file not available"),
    ("eNotAllowedForThisProxy", "Not allowed for this proxy"),
    ("eNotSupportedInDwgApi", "Not supported in API"),
    ("ePolyWidthLost", "Poly width lost"),
    ("eNullExtents", "Null extents"),
    ("eExplodeAgain", "Explode again"),
    ("eBadDwgHeader", "Bad .dwg file header"),
    ("eLockViolation", "Lock violation"),
    ("eLockConflict", "Lock conflict"),
    ("eDatabaseObjectsOpen", "Database objects open"),
    ("eLockChangeInProgress", "Lock change in progress"),
    ("eVetoed", "Vetoed"),
    ("eNoDocument", "ODAX no document"),
    ("eNotFromThisDocument", "Not from this document"),
    ("eLISPActive", "LISP active"),
    ("eTargetDocNotQuiescent", "Target doc not quiescent"),
    ("eDocumentSwitchDisabled", "Document switch disabled"),
    ("eInvalidContext", "Invalid context of execution"),
    ("eCreateFailed", "Create failed"),
    ("eCreateInvalidName", "Create invalid name"),
    ("eSetFailed", "Setting active Layout failed"),
    ("eDelDoesNotExist", "Does not exist"),
    ("eDelIsModelSpace", "Model Space Layout can't be deleted"),
    ("eDelLastLayout", "Last Paper Space Layout can't be deleted"),
    ("eDelUnableToSetCurrent", "Unable to delete current"),
    ("eDelUnableToFind", "Unable to find to delete"),
    ("eRenameDoesNotExist", "Cannot rename non-existing"),
    ("eRenameIsModelSpace", "Model Space Layout can't be renamed"),
    ("eRenameInvalidLayoutName", "Invalid Layout name"),
    ("eRenameLayoutAlreadyExists", "Layout already exists"),
    ("eRenameInvalidName", "Cannot rename: the name is invalid"),
    ("eCopyDoesNotExist", "Copy failed: object does not exist"),
    ("eCopyIsModelSpace", "Cannot copy Model Space"),
    ("eCopyFailed", "Copy failed"),
    ("eCopyInvalidName", "Copy failed: invalid name"),
    ("eCopyNameExists", "Copy failed: such name already exists"),
    ("eProfileDoesNotExist", "Profile does not exist"),
    ("eInvalidProfileName", "Invalid profile name"),
    ("eProfileIsInUse", "Profile is in use"),
    ("eRegistryAccessError", "Registry access error"),
    ("eRegistryCreateError", "Registry create error"),
    ("eBadDxfFile", "Bad Dxf file"),
    ("eUnknownDxfFileFormat", "Unknown Dxf file format"),
    ("eMissingDxfSection", "Missing Dxf section"),
    ("eInvalidDxfSectionName", "Invalid Dxf section name"),
    ("eNotDxfHeaderGroupCode", "Not Dxf header group code"),
    ("eUndefinedDxfGroupCode", "Undefined Dxf group code"),
    ("eNotInitializedYet", "Not initialized yet"),
    ("eInvalidDxf2dPoint", "Invalid Dxf 2d point"),
    ("eInvalidDxf3dPoint", "Invalid Dxf 3d point"),
    ("eBadlyNestedAppData", "Badly nested AppData"),
    ("eIncompleteBlockDefinition", "Incomplete Block definition"),
    ("eIncompleteComplexObject", "Incomplete complex object"),
    ("eBlockDefInEntitySection", "Block definition in entity section"),
    ("eNoBlockBegin", "No symbol begin"),
    ("eDuplicateLayerName", "Duplicate Layer name"),
    ("eBadPlotStyleName", "Bad PrintStyle name"),
    ("eDuplicateBlockName", "Duplicate Block name"),
    ("eBadPlotStyleType", "Bad PlotStyle type"),
    ("eBadPlotStyleNameHandle", "Bad PlotStyle name handle"),
    ("eUndefineShapeName", "Undefined Shape name"),
    ("eDuplicateBlockDefinition", "Duplicate Block definition"),
    ("eMissingBlockName", "Missing Block name"),
    ("eBinaryDataSizeExceeded", "Binary data size exceeded"),
    ("eObjectIsReferenced", "Object is referenced"),
    ("eInvalidThumbnailBitmap", "Invalid thumbnail bitmap"),
    ("eDuplicateName", "Duplicate name"),
    ("eGuidNoAddress", "eGuidNoAddress"),
    ("eMustBe0to2", "Must be 0 to 2"),
    ("eMustBe0to3", "Must be 0 to 3"),
    ("eMustBe0to4", "Must be 0 to 4"),
    ("eMustBe0to5", "Must be 0 to 5"),
    ("eMustBe0to8", "Must be 0 to 8"),
    ("eMustBe1to8", "Must be 1 to 8"),
    ("eMustBe1to15", "Must be 1 to 15"),
    ("eMustBePositive", "Must be positive"),
    ("eMustBeNonNegative", "Must be non negative"),
    ("eMustBeNonZero", "Must be non zero"),
    ("eMustBe1to6", "Must be 1 to 6"),
    ("eNoPlotStyleTranslationTable", "No PlotStyle translation table"),
    ("ePlotStyleInColorDependentMode", "PrintStyle is in color dependent mode"),
    ("eMaxLayouts", "Max Layouts"),
    ("eNoClassId", "No ClassId"),
    ("eUndoOperationNotAvailable", "Undo operation is not available"),
    ("eUndoNoGroupBegin", "No undo group begin"),
    ("eHatchTooDense", "Hatch is too dense - ignoring"),
    ("eOpenFileCancelled", "File open cancelled"),
    ("eNotHandled", "Not handled"),
    ("eNotImplemented", "Not Implemented"),
    ("eLibIntegrityBroken", "Library integrity is broken"),
    ("eAlreadyActive", "Already active"),
    ("eAlreadyInactive", "Already inactive"),
    ("eCodepageNotFound", "Codepage not found"),
    ("eIncorrectInitFileVersion", "Incorrect init file version"),
    ("eInternalFreetypeError", "Internal error in Freetype font library"),
    ("eNoUCSPresent", "No CoordinateSystem present in entity"),
    ("eBadObjType", "Object has wrong type"),
    ("eBadProtocolExtension", "Protocol extension object is bad"),
    ("eHatchInvalidPatternName", "Bad name for Hatch pattern"),
    ("eNotTransactionResident", "Object is not transaction resident"),
    ("eDwgFileIsEncrypted", ".dwg file is encrypted"),
    ("eInvalidPassword", "The password is incorrect"),
    ("eDecryptionError", "HostApp cannot decrypt data"),
    ("eArithmeticOverflow", "An arithmetic overflow"),
    ("eSkipObjPaging", "Paging skips the object"),
    ("eStopPaging", "Paging is stoped"),
    ("eInvalidDimStyleResBufData", "Invalid ResBuf with DimensionStyle data"),
    ("eExtendedError", "Extended error"),
    ("eGripOpFailure", "The grip operation has failed"),
    ("eGripOpNoRedrawGrip", "NoRedrawGrip"),
    ("eGripOpGripHotToWarm", "GripHotToWarm"),
    ("eGripOpGetNewGripPoints", "GetNewGripPoints"),
    ("eUnsupportedEarlyDwgVersion", "Unsupported early .dwg file version"),
    ("eCannotChangeColumnType", "Cannot change column type"),
    ("eCustomSizeNotPossible", "Custom size not possible"),
    ("eDataLinkAdapterNotFound", "DataLink adapter not found"),
    ("eDataLinkInvalidAdapterId", "DataLink invalid adapter id"),
    ("eDataLinkNotFound", "DataLink not found"),
    ("eDataLinkBadConnectionString", "DataLink bad connection string"),
    ("eDataLinkNotUpdatedYet", "DataLink not updated yet"),
    ("eDataLinkSourceNotFound", "DataLink source not found"),
    ("eDataLinkConnectionFailed", "DataLink connection failed"),
    ("eDataLinkSourceUpdateNotAllowed", "DataLink source update not allowed"),
    ("eDataLinkSourceIsWriteProtected", "DataLink source is write protected"),
    ("eDataLinkExcelNotFound", "DataLink excel not found"),
    ("eDataLinkOtherError", "DataLink other error"),
    ("eDeviceNotFound", "Device not found"),
    ("eDwgCrcDoesNotMatch", "CRC does not match"),
    ("eDwgShareDemandLoad", ".dwg file share demand load"),
    ("eDwgShareReadAccess", ".dwg file share read access"),
    ("eDwgShareWriteAccess", ".dwg file share write access"),
    ("eFileMissingSections", "Missing section"),
    ("eFileSharingViolation", "File sharing violation"),
    ("eFiniteStateMachineError", "Finite state machine error"),
    ("eGraphicsNotGenerated", "Graphics not generated"),
    ("eHandleExists", "Handle exists"),
    ("eIgnoredLinetypeRedefinition", "Ignored LineType redefinition"),
    ("eIncompatiblePlotSettings", "Incompatible PlotSettings"),
    ("eInternetBadPath", "Bad path"),
    ("eInternetBase", "Base"),
    ("eInternetCreateInternetSessionFailed", "CreateInternetSessionFailed"),
    ("eInternetDirectoryFull", "DirectoryFull              "),
    ("eInternetDiskFull", "DiskFull                   "),
    ("eInternetFileAccessDenied", "FileAccessDenied           "),
    ("eInternetFileGenericError", "FileGenericError           "),
    ("eInternetFileNotFound", "FileNotFound               "),
    ("eInternetFileOpenFailed", "FileOpenFailed             "),
    ("eInternetGenericException", "GenericException           "),
    ("eInternetHardwareError", "HardwareError              "),
    ("eInternetHttpAccessDenied", "HttpAccessDenied           "),
    ("eInternetHttpBadGateway", "HttpBadGateway             "),
    ("eInternetHttpBadMethod", "HttpBadMethod              "),
    ("eInternetHttpBadRequest", "HttpBadRequest             "),
    ("eInternetHttpConflict", "HttpConflict               "),
    ("eInternetHttpGatewayTimeout", "HttpGatewayTimeout         "),
    ("eInternetHttpLengthRequired", "HttpLengthRequired         "),
    ("eInternetHttpNoAcceptableResponse", "HttpNoAcceptableResponse   "),
    ("eInternetHttpNotSupported", "HttpNotSupported           "),
    ("eInternetHttpObjectNotFound", "HttpObjectNotFound         "),
    ("eInternetHttpOpenRequestFailed", "HttpOpenRequestFailed      "),
    ("eInternetHttpPaymentRequired", "HttpPaymentRequired        "),
    ("eInternetHttpPreconditionFailure", "HttpPreconditionFailure    "),
    ("eInternetHttpProxyAuthorizationRequired", "HttpProxyAuthorizationRequired "),
    ("eInternetHttpRequestForbidden", "HttpRequestForbidden           "),
    ("eInternetHttpRequestTooLarge", "HttpRequestTooLarge            "),
    ("eInternetHttpResourceGone", "HttpResourceGone               "),
    ("eInternetHttpServerError", "HttpServerError                "),
    ("eInternetHttpServiceUnavailable", "HttpServiceUnavailable         "),
    ("eInternetHttpTimedOut", "HttpTimedOut                   "),
    ("eInternetHttpUnsupportedMedia", "HttpUnsupportedMedia           "),
    ("eInternetHttpUriTooLong", "HttpUriTooLong                 "),
    ("eInternetHttpVersionNotSupported", "HttpVersionNotSupported        "),
    ("eInternetInCache", "InCache                        "),
    ("eInternetInternetError", "InternetError                  "),
    ("eInternetInternetSessionConnectFailed", "InternetSessionConnectFailed   "),
    ("eInternetInternetSessionOpenFailed", "InternetSessionOpenFailed      "),
    ("eInternetInvalidAccessType", "InvalidAccessType              "),
    ("eInternetInvalidFileHandle", "InvalidFileHandle              "),
    ("eInternetNoInternetSupport", "NoInternetSupport              "),
    ("eInternetNotAnUrl", "NotAnUrl                       "),
    ("eInternetNotImplemented", "NotImplemented                 "),
    ("eInternetNoWinInternet", "NoWinInternet                  "),
    ("eInternetOK", "OK                             "),
    ("eInternetOldWinInternet", "OldWinInternet                 "),
    ("eInternetProtocolNotSupported", "ProtocolNotSupported           "),
    ("eInternetSharingViolation", "SharingViolation               "),
    ("eInternetTooManyOpenFiles", "TooManyOpenFiles               "),
    ("eInternetUnknownError", "UnknownError                   "),
    ("eInternetUserCancelledTransfer", "UserCancelledTransfer          "),
    ("eInternetValidUrl", "Valid URL"),
    ("eInvalidEngineState", "Invalid engine state"),
    ("eInvalidFaceVertexIndex", "Invalid Face vertex index"),
    ("eInvalidFileExtension", "Invalid file extension"),
    ("eInvalidMeshVertexIndex", "Invalid Mesh vertex index"),
    ("eInvalidObjectId", "Invalid object Id"),
    ("eInvalidPlotArea", "Invalid plot area"),
    ("eInvalidPlotInfo", "Invalid plot info"),
    ("eInvalidView", "Invalid View"),
    ("eInvalidWindowArea", "Invalid window area"),
    ("eInvalidXrefObjectId", "Invalid Xref object Id"),
    ("eLayoutNotCurrent", "Layout not current"),
    ("eMakeMeProxyAndResurrect", "Make me proxy and resurrect"),
    ("eMustPlotToFile", "Must plot to file"),
    ("eCannotPlotToFile", "Cannot plot to file"),
    ("eNoCurrentConfig", "No current config"),
    ("eNoErrorHandler", "No error handler"),
    ("eNoLabelBlock", "No label Block"),
    ("eNoLayout", "No Layout"),
    ("eNoMatchingMedia", "No matching media"),
    ("eNonePlotDevice", "None plot device"),
    ("eNoThumbnailBitmap", "No thumbnail bitmap"),
    ("eNotMultiPageCapable", "Not multipage capable"),
    ("eNoViewAssociation", "No View association"),
    ("eNullPtr", "Null Ptr"),
    ("eNumberOfCopiesNotSupported", "Number of copies not supported"),
    ("eObsoleteFileFormat", "Obsolete file format"),
    ("ePageCancelled", "Page cancelled"),
    ("ePlotAlreadyStarted", "Plot already started"),
    ("ePlotCancelled", "Plot cancelled"),
    ("eRepeatedDwgRead", "Repeated .dwg file read"),
    ("eRowsMustMatchColumns", "Rows must match columns"),
    ("eSecErrorCipherNotSupported", "Error cipher not supported"),
    ("eSecErrorComputingSignature", "Error computing signature"),
    ("eSecErrorDecryptingData", "Error decrypting data"),
    ("eSecErrorEncryptingData", "Error encrypting data"),
    ("eSecErrorGeneratingTimestamp", "Error generating timestamp"),
    ("eSecErrorReadingFile", "Error reading file"),
    ("eSecErrorWritingFile", "Error writing file"),
    ("eSecErrorWritingSignature", "Error writing signature"),
    ("eSecInitializationFailure", "Initialization failure"),
    ("eSecInvalidDigitalId", "Invalid digital id"),
    ("eLoadFailed", "Load failed"),
    ("eSubSelectionSetEmpty", "SubSelectionSet empty"),
    ("eUnableToGetLabelBlock", "Unable to get label Block"),
    ("eUnableToGetViewAssociation", "Unable to get View association"),
    ("eUnableToRemoveAssociation", "Unable to remove association"),
    ("eUnableToSetLabelBlock", "Unable to set label Block"),
    ("eUnableToSetViewAssociation", "Unable to set View association"),
    ("eUnableToSyncModelView", "Unable to sync Model View"),
    ("eUnsupportedFileFormat", "Unsupported file format"),
    ("eUserBreak", "User break"),
    ("eWasNotErased", "Was not erased"),
    ("eWrongCellType", "Wrong cell type"),
    ("eTxError", "Tx application error"),
    ("eHiddenLayerNotAllowed", "Hidden Layer not allowed"),
    ("eInvalidLicense", "Invalid license"),
    ("eIncorrectDatabaseType", "Invalid database type"),
    ("eInvalidCategory", "Invalid category"),
    (
        "eCryptProviderUnavailable",
        "The cryptography service provider \"%ls\" used to protect this drawing "
        "is not installed on this computer",
    ),
    (
        "eInvalidNumPCurves",
        "The number of curves does not match with the number of parameter-space curves",
    ),
    ("eNoTrimmigLoop", "Trimming loop is undefined"),
    ("eBrokenTrimmingLoop", "Edges are not ordered"),
    ("eBadApexLoop", "Bad loop in apex"),
    ("eLoopNotClosed", "Trimming loop must be closed"),
    ("eLoopIsNotOnFace", "Trimming loop is not placed on the face"),
    ("eLoopSelfIntersecting", "Self-intersecting trimming loop"),
    (
        "eInvalidIntervals",
        "Intervals of 3d curves differ from their parameter-space curves intervals",
    ),
    ("eEmptySet", "Set of elements is empty"),
    ("eInfinite", "Infinite / unbounded object"),
    (
        "eDataTooLarge",
        "Uncompressed object size is too large to be saved to specified .dwg version",
    ),
    ("eSyntaxError", "Syntax error"),
    ("eDisabledInConfig", "Disabled for this platform or configuration"),
    ("eCantSetEnvVar", "Can not set environment variable"),
    ("eInvalidSurface", "Invalid surface"),
    ("eInvalidOrientation", "Invalid orientation"),
    ("eLoopsIntersecting", "Loops intersect"),
    ("eInvalidEdge", "Invalid edge"),
    ("eNullEdgeCurve", "Null edge curve"),
    ("eNullFaceSurface", "Null face surface"),
    ("eStartOrEndPntNotSet", "Start or end point of edge not set"),
    ("eIntervalIsTooShort", "Interval is too short"),
    ("eCurveLengthIsTooShort", "Length of curve is too short"),
    ("eCurveEndsMissed", "Curve ends missed"),
    ("ePointNotOnCurve", "Point not on curve"),
    ("eInvalidProps", "Invalid properties of the object"),
    ("eInvalidCurve", "Invalid curve"),
    ("eDiscontinuousCurve", "Discontinuous curve"),
    ("eParamHasNoValue", "The parameter does not have a value"),
    ("eBrFileMissed", "Brep File missed"),
    ("eBrBrepMissed", "Brep missed"),
    ("eBrComplexMissed", "Brep Complex missed"),
    ("eBrShellMissed", "Brep Shell missed"),
    ("eBrFaceMissed", "Brep Face missed"),
    ("eBrLoopMissed", "Brep Loop missed"),
    ("eBrEdgeMissed", "Brep Edge missed"),
    ("eBrVertexMissed", "Brep Vertex missed"),
    ("eBrEmptyLoop", "Brep empty Loop"),
    ("eCellNotFound", "Cell not found"),
    ("eInvalidElementState", "Invalid element state"),
    ("eNoIntersections", "No intersections"),
    ("eMSmemcpySecureInvalidParameter", "Invalid parameter passed to memcpy_s"),
    ("eMSmemmoveSecureInvalidParameter", "Invalid parameter passed to memmove_s"),
    ("eDaiInternalError", "DAI internal error"),
    ("eIncorrectSchema", "Incorrect schema"),
    ("eUnsupportedSchema", "Unsupported schema"),
    ("eEmptyRepository", "Empty repository"),
    ("eFailedToEvaluate", "Failed to evaluate"),
    ("eFailedToEvaluateDependents", "Failed to evaluate dependents"),
    ("eInvalidExpression", "Invalid expression"),
    ("eCyclicDependency", "Cyclic dependency"),
)

_TEXTS: dict[str, str] = dict(_ERRORS)
_NAMES: tuple[str, ...] = tuple(name for name, _ in _ERRORS)

# Alternative spellings that refer to an existing code.
_ALIASES: dict[str, str] = {
    "eCannotBeErased": "eCannotBeErasedByCaller",
}


def error_names() -> tuple[str, ...]:
    """Return every error name in code order; the position is the code value."""
    return _NAMES


def error_text(name: str) -> str:
    """Return the message text for an error name or one of its aliases.

    Raises KeyError if the name is unknown.
    """
    canonical = _ALIASES.get(name, name)
    try:
        return _TEXTS[canonical]
    except KeyError:
        raise KeyError(f"unknown error name: {name!r}") from None